mutators = {
    "Radamsa":
    {
        "name": "Radamsa",
        "file": "radamsa",
        "args": [ '-s', '%(seed)s' ],
        "type": "mut"
    },
    "Zzuf":
    {
        "name": "Zzuf",
        "file": "zzuf",
        "args": [ '-r', '0.01', '-s', '%(seed)s' ],
        "type": "mut"
    },
    "Dumb":
    {
        "name": "Dumb",
        "class": "MutatorDumb",
        "type": "mut",
    },
}
