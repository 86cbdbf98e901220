'''
    Text renderings of raw bytes and integers used to build token content: standard base64 (RFC 4648 alphabet with
    '=' padding), lowercase hex and plain decimal strings. Everything here is total over valid input; bad lengths or
    negative numbers are programming errors and raise ValueError.
'''

import base64
import binascii

DATA_URI_FORMAT = 'data:{};base64,{}'


def base64_encode(data: bytes) -> str:
    return base64.b64encode(bytes(data)).decode('ascii')


def base64_decode(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise ValueError('Invalid base64 input: {}'.format(e))


def to_hex(data: bytes, n: int) -> str:
    if n < 0 or n > len(data):
        raise ValueError('Cannot render {} bytes of a {} byte value.'.format(n, len(data)))
    return bytes(data[:n]).hex()


def decimal_string(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError('{!r} is not an integer.'.format(value))
    if value < 0:
        raise ValueError('{} is negative.'.format(value))
    return str(value)


def data_uri(mime: str, payload: bytes) -> str:
    return DATA_URI_FORMAT.format(mime, base64_encode(payload))


def unwrap_data_uri(uri: str, mime: str) -> bytes:
    prefix = DATA_URI_FORMAT.format(mime, '')
    if not uri.startswith(prefix):
        raise ValueError('Expected a {} data URI.'.format(mime))
    return base64_decode(uri[len(prefix):])
