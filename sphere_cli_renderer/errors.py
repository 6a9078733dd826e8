#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

""" Custom exceptions for sphere-cli-renderer. """


class RendererError(Exception):

    """ Base class for errors raised by the renderer. """

    pass


class TerminalUnavailableError(RendererError):

    """ Thrown when the output terminal's dimensions cannot be determined. """

    def __init__(self, reason):
        self.reason = reason
        super().__init__(f"cannot determine terminal size: {reason}")
