from bloomkit.bits.bitset import BitSet

__all__ = ["BitSet"]
