from bloomkit.io.codec import HEADER, MAX_HASH_COUNT, decode, encode

__all__ = ["HEADER", "MAX_HASH_COUNT", "decode", "encode"]
