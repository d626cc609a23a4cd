import contextlib


class CustomPrint(object):
    """
    This class defines a callable object that works similarly to the print()
    function. However, it provides a context manager that allows you to specify
    a different write function, so that output can be captured or sent
    somewhere other than standard output.

    """

    def __init__(self):
        self.write = self.default_write

    def __call__(self, message=None, **kwargs):
        self.write(message, **kwargs)

    def default_write(self, message=None, **kwargs):
        if message is None:
            # If there were no arguments at all, print a newline to stdout.
            if len(kwargs) == 0:
                print()
        else:
            print(message, **kwargs)

    @contextlib.contextmanager
    def use_write_function(self, func):
        self.write = func
        try:
            yield
        finally:
            self.write = self.default_write


cprint = CustomPrint()
