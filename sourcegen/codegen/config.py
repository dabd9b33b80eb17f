class InvocationLayout(object):
    """Controls how a constructor invocation is rendered.

    With `multiline` set every argument goes on its own line, indented by
    `indent` spaces:

        new Point(
              x,
              y)
    """

    def __init__(self, multiline=False, indent=6, new_keyword=False):
        self.multiline = multiline
        self.indent = indent
        self.new_keyword = new_keyword

    def __str__(self):
        return "InvocationLayout(multiline={}, indent={}, new_keyword={})"\
            .format(self.multiline, self.indent, self.new_keyword)


class Config(object):
    def __init__(self):
        self.invocation = InvocationLayout()


cfg = Config()
