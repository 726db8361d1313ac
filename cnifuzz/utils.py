import logging


"""
Several utility functions.
"""


# https://stackoverflow.com/questions/11602386/python-function-for-capping-a-string-to-a-maximum-length
def cap(s, l):
    return s if len(s) <= l else s[0:l - 3] + '...'


def xstr(s):
    if s is None:
        return '-'
    return str(s)


def toText(data):
    """Bytes produced by the mutator or the plugin may be anything."""
    if data is None:
        return ''
    if isinstance(data, str):
        return data
    return data.decode('utf-8', errors='replace')


def setupLoggingWithFile(debugLog='cnifuzz-debug.log'):
    # https://stackoverflow.com/questions/9321741/printing-to-screen-and-writing-to-a-file-at-the-same-time
    logging.basicConfig(level=logging.DEBUG,
                        format='%(asctime)s %(name)-12s %(levelname)-8s %(message)s',
                        datefmt='%m-%d %H:%M',
                        filename=debugLog,
                        filemode='w')
    # define a Handler which writes WARN messages or higher to the sys.stderr
    console = logging.StreamHandler()
    console.setLevel(logging.WARN)
    formatter = logging.Formatter('%(name)-12s: %(levelname)-8s %(message)s')
    console.setFormatter(formatter)
    logging.getLogger('').addHandler(console)


def setupLoggingStandard(debug=False):
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARN,
                        format='%(asctime)s %(name)-12s %(levelname)-8s %(message)s',
                        datefmt='%m-%d %H:%M')
