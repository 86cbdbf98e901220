'''
    Token content is never stored. Every query hashes the token id, the environment clock, the environment block
    counter and the current owner into a 32 byte seed, and everything visible about the token (colour, geometry,
    the seed trait) is read off that seed. The same token therefore renders differently whenever its owner or the
    environment has moved on between two queries.
'''

import json
from collections import namedtuple

from artledger import config
from artledger.art import svg
from artledger.stdlib.bridge.codec import data_uri, decimal_string, to_hex
from artledger.stdlib.bridge.hashing import sha3

Geometry = namedtuple('Geometry', ['rotation', 'x', 'y', 'radius', 'accent_rotation'])


def u256(value: int) -> bytes:
    return value.to_bytes(config.UINT256_BYTES, 'big')


def derive_seed(token_id: int, timestamp: int, block_num: int, owner: str) -> bytes:
    packed = u256(token_id) + u256(timestamp) + u256(block_num) + owner.encode('utf-8')
    return sha3(packed)


def derive_color(seed: bytes) -> str:
    return to_hex(seed, config.COLOR_BYTES)


def derive_geometry(seed: bytes, token_id: int) -> Geometry:
    s = int.from_bytes(seed, 'big')

    return Geometry(
        rotation=s % config.ROTATION_MODULUS,
        x=(s >> 8) % config.POSITION_MODULUS,
        y=(s >> 16) % config.POSITION_MODULUS,
        radius=config.RADIUS_BASE + token_id % config.RADIUS_MODULUS,
        accent_rotation=(s >> 24) % config.ROTATION_MODULUS
    )


def token_name(token_id: int) -> str:
    return '{} #{}'.format(config.COLLECTION_NAME, decimal_string(token_id))


def build_image(token_id: int, color: str, geometry: Geometry) -> svg.Element:
    root = svg.header(color)
    root.append(svg.circle_group(geometry.rotation, geometry.x, geometry.y, geometry.radius))
    root.append(svg.accent_group(color, geometry.accent_rotation))
    root.append(svg.footer(token_name(token_id)))
    return root


def build_metadata(token_id: int, seed: bytes, image_uri: str) -> dict:
    return {
        'name': token_name(token_id),
        'description': config.COLLECTION_DESCRIPTION,
        'attributes': [
            {
                'trait_type': 'seed',
                'value': '0x' + to_hex(seed, config.SEED_TRAIT_BYTES)
            }
        ],
        'image': image_uri
    }


def serialize_metadata(metadata: dict) -> str:
    return json.dumps(metadata, separators=(',', ':'), ensure_ascii=False)


def render_seed(token_id: int, seed: bytes) -> str:
    image = build_image(token_id, derive_color(seed), derive_geometry(seed, token_id))
    image_uri = data_uri(config.SVG_MIME, image.render().encode('utf-8'))

    metadata = serialize_metadata(build_metadata(token_id, seed, image_uri))
    return data_uri(config.JSON_MIME, metadata.encode('utf-8'))


def render_token_uri(token_id: int, owner: str, timestamp: int, block_num: int) -> str:
    return render_seed(token_id, derive_seed(token_id, timestamp, block_num, owner))
