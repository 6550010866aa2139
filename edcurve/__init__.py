"""Edwards curve fields, groups G1 and G2, and Tate and ate pairings."""

__version__ = "0.1.0"

__all__ = ["fields", "curve_utils", "params", "g1", "g2", "tate", "ate", "pp"]