DELIMITER = ':'
INDEX_SEPARATOR = '.'

MAX_HASH_DIMENSIONS = 16
MAX_KEY_SIZE = 1024

PRIVATE_METHOD_PREFIX = '_'
EXPORT_ATTRIBUTE = '__export__'

# Ledger
CONTRACT_NAME = 'art_ledger'
NULL_ADDRESS = '0' * 64
UINT256_BYTES = 32
MAX_UINT256 = 2 ** 256 - 1

COLLECTION_NAME = 'AI Dynamic Art'
COLLECTION_SYMBOL = 'AIDA'
COLLECTION_DESCRIPTION = 'Generative artwork computed on demand from its token, its owner and the state of the chain ' \
                         'at the moment it is viewed.'

# Artwork
CANVAS_SIZE = 500
BACKGROUND_COLOR = '0d0d1a'
TEXT_COLOR = 'ffffff'
GRADIENT_ID = 'glow'

ROTATION_MODULUS = 360
POSITION_MODULUS = 300
RADIUS_BASE = 40
RADIUS_MODULUS = 80

COLOR_BYTES = 3
SEED_TRAIT_BYTES = 8

SVG_MIME = 'image/svg+xml'
JSON_MIME = 'application/json'

# Environment
NOW_KEY = 'now'
BLOCK_NUM_KEY = 'block_num'
BLOCK_NUM_DEFAULT = 0

DEFAULT_LOG_LEVEL = 'WARNING'
