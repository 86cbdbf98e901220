import hashlib

'''
Digests are returned as raw bytes. Callers that need text go through the codec bridge.
'''


def sha3(data: bytes):
    hasher = hashlib.sha3_256()
    hasher.update(data)

    return hasher.digest()
