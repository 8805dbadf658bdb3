# SPDX-License-Identifier: MIT


class ValidationError(Exception):
    """
    Raised when import input cannot be accepted.

    The message is written for the end user and can be shown verbatim.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
