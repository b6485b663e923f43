"""
Test script to verify all imports work correctly.
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def test_imports():
    print("Testing imports...")

    from crtpaillier.config import get_config, PaillierConfig
    print("[OK] config module")

    from crtpaillier.crypto import (
        generate_key_pair,
        encrypt,
        decrypt,
        encrypt_array
    )
    print("[OK] crypto module")

    from crtpaillier.utils import setup_logging, MetricsTracker, save_key_pair
    print("[OK] utils module")

    import crtpaillier
    assert crtpaillier.generate_key_pair is generate_key_pair
    assert crtpaillier.__version__


if __name__ == '__main__':
    test_imports()
    print("\nAll imports tested successfully!")
