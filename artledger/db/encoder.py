import json

MAX_NATIVE_INT = 2 ** 63 - 1
MIN_NATIVE_INT = -(2 ** 63)

##
# Ledger values are strings, bools and integers. Integers outside the signed 64 bit range (uint256 counters and
# balances) are stored as tagged strings so any backing store can hold them.
##


def encode_int(value: int):
    if MIN_NATIVE_INT <= value <= MAX_NATIVE_INT:
        return value

    return {
        '__big_int__': str(value)
    }


def encode_ints(data):
    if isinstance(data, bool):
        return data
    elif isinstance(data, int):
        return encode_int(data)
    elif isinstance(data, dict):
        return {k: encode_ints(v) for k, v in data.items()}
    elif isinstance(data, (list, tuple)):
        return [encode_ints(i) for i in data]
    return data


def encode(data):
    return json.dumps(encode_ints(data), separators=(',', ':'))


def as_object(d):
    if '__big_int__' in d:
        return int(d['__big_int__'])
    return dict(d)


# Decode has a hook for JSON objects, which are just Python dictionaries. You have to specify the logic in this hook.
def decode(data):
    if data is None:
        return None

    if isinstance(data, bytes):
        data = data.decode()

    try:
        return json.loads(data, object_hook=as_object)
    except json.decoder.JSONDecodeError:
        return None
