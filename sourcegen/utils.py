import sys


class Logger(object):
    """Writes log lines to a stream (stderr by default).

    The code generation helpers never open files; a caller that wants a log
    file passes an open stream. A quiet logger (`verbose=False`) keeps its
    lines in `lines` instead of writing them.
    """

    def __init__(self, name, stream=None, verbose=True):
        self.name = name
        self.stream = stream if stream is not None else sys.stderr
        self.verbose = verbose
        self.lines = []

    def log_info(self):
        self.log("{}: logging started".format(self.name))

    def log(self, msg):
        if not self.verbose:
            self.lines.append(msg)
            return
        self.stream.write("[{}] {}\n".format(self.name, msg))
        self.stream.flush()
