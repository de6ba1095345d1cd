# Optcompose CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by option modules.

These signals interrupt the normal parse-and-validate flow (e.g., the user asked
for help) without being treated as errors.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: Show the usage text and stop.
- VersionSignal: Show the program version and stop.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Optcompose.

    These are not errors. The application's error boundary turns them into
    output and a zero exit code.
    """


class HelpSignal(FlowSignal):
    """Raised to display help information."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
        self.text = message


class VersionSignal(FlowSignal):
    """Raised to display the program version."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)
        self.text = message
