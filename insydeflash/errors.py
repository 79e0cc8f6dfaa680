# SPDX-License-Identifier: MIT

__all__ = [
    'ExtractError', 'SignatureNotFound', 'FileOpenError', 'FileReadError',
    'FileWriteError', 'InvalidParameter', 'OutOfMemory', 'TruncatedHeader',
    'TruncatedPayload',
]

class ExtractError(Exception):
    """Base class. exit_code is what the command line tool returns."""
    exit_code = 1

class SignatureNotFound(ExtractError):
    exit_code = 1

class FileOpenError(ExtractError):
    exit_code = 2

class FileReadError(ExtractError):
    exit_code = 3

class FileWriteError(ExtractError):
    exit_code = 4

class InvalidParameter(ExtractError):
    exit_code = 5

class OutOfMemory(ExtractError):
    exit_code = 6

class TruncatedHeader(ExtractError):
    exit_code = 7

class TruncatedPayload(ExtractError):
    exit_code = 8
