# Cmdline Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by the command line parser.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they
bypass `except Exception` blocks in store callbacks and only stop at the
parser loop, where they become `Status.ERR_SILENT`.

Signals:
- HelpSignal: Help, version or an error diagnostic was already printed.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in cmdline.

    These are not errors. They end the parsing loop after output has already
    been produced for the user.
    """


class HelpSignal(FlowSignal):
    """Raised once help or a diagnostic has been rendered."""

    def __init__(self, topic: str = "", message: str = "Help signal received."):
        super().__init__(message)
        self.topic = topic
