DefaultConfig = {
    # path to the CNI plugin which is being fuzzed
    "cni_bin": "/opt/cni/bin/sriov",

    # number of fuzzing iterations (one ADD, and maybe one DEL each)
    "tests": 100000,

    # PCI address of the test device. Used for the generated seed config
    "device": "",

    # seed network config file. If set, "device" is ignored
    "config": "",

    # transcript of all plugin invocations
    "log_file": "cnifuzz.log",

    # only write failed invocations with a crash marker to the transcript
    "panic_only": False,

    # which mutators should be used (round robin)
    "mutator": [ "Radamsa" ],

    # CNI_CONTAINERID and CNI_IFNAME of every invocation
    "container_id": "dummy",
    "ifname": "net1",

    # use an existing network namespace (path) instead of creating one
    # a given namespace is neither created nor deleted by us
    "netns": None,

    # id of the namespace we create: cnifuzz-<id>
    "namespace_id": 0,

    # how to detect a crash of the plugin: marker, signal or any
    "crash_detector": "marker",
    "crash_markers": [ "panic" ],

    # abort the session if a DEL fails after a successful ADD
    # a failed DEL may leave the namespace in an undefined state
    "abort_on_del_failure": True,

    # log progress every X iterations
    "stats_interval": 1000,

    # write a fuzzer_stats like file at the end (optional)
    "stats_file": None,

    # write the input data of the transcript as hexdump
    "transcript_hexdump": False,

    # values of the generated seed config (besides deviceID)
    "cni_version": "0.3.0",
    "net_name": "sriov-net-test",
    "net_type": "sriov",
    "spoofchk": "off",

    "debug": False,
}
