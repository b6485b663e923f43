"""
Utility functions for crtpaillier.
"""

from .helpers import (
    set_seed,
    setup_logging,
    MetricsTracker,
    ResultsSaver,
    format_time
)

from .serialization import (
    int_to_bytes,
    int_from_bytes,
    public_key_to_dict,
    public_key_from_dict,
    private_key_to_dict,
    private_key_from_dict,
    save_key_pair,
    load_public_key,
    load_private_key
)

__all__ = [
    'set_seed',
    'setup_logging',
    'MetricsTracker',
    'ResultsSaver',
    'format_time',
    'int_to_bytes',
    'int_from_bytes',
    'public_key_to_dict',
    'public_key_from_dict',
    'private_key_to_dict',
    'private_key_from_dict',
    'save_key_pair',
    'load_public_key',
    'load_private_key'
]
