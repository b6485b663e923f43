"""
Utility functions for crtpaillier.

Provides helper functions for:
- Random seed setting
- Logging configuration
- Timing metrics
- Result saving
"""

import os
import json
import random
import logging
import numpy as np
from datetime import datetime
from typing import Dict, List, Any, Optional


def set_seed(seed: int = 42):
    """
    Seed the non-cryptographic generators used for benchmark plaintexts.

    Key material and encryption randomness always come from the system
    CSPRNG and are not affected.

    Args:
        seed: Random seed value
    """
    random.seed(seed)
    np.random.seed(seed)


def setup_logging(
    log_dir: Optional[str] = None,
    log_level: int = logging.INFO,
    name: str = 'crtpaillier'
) -> logging.Logger:
    """
    Setup logging configuration.

    Args:
        log_dir: Directory for log files (console only when None)
        log_level: Logging level
        name: Logger name, also used as the log file prefix

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers = []

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = os.path.join(log_dir, f'{name}_{timestamp}.log')

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


class MetricsTracker:
    """Tracks and stores timing metrics."""

    def __init__(self):
        self.metrics: Dict[str, List[float]] = {}

    def add_scalar(self, name: str, value: float):
        """Add a scalar metric."""
        if name not in self.metrics:
            self.metrics[name] = []
        self.metrics[name].append(value)

    def get_latest(self, name: str) -> Optional[float]:
        """Get latest value for a metric."""
        values = self.metrics.get(name, [])
        return values[-1] if values else None

    def get_best(self, name: str, mode: str = 'min') -> Optional[float]:
        """Get best value for a metric (fastest by default)."""
        values = self.metrics.get(name, [])
        if not values:
            return None
        return max(values) if mode == 'max' else min(values)

    def get_mean(self, name: str) -> Optional[float]:
        values = self.metrics.get(name, [])
        if not values:
            return None
        return float(np.mean(values))

    def summary(self) -> Dict[str, Dict[str, float]]:
        """Mean, min and max per metric."""
        return {
            name: {
                'mean': float(np.mean(values)),
                'min': float(np.min(values)),
                'max': float(np.max(values)),
                'count': len(values)
            }
            for name, values in self.metrics.items() if values
        }

    def to_dict(self) -> Dict[str, List[float]]:
        """Convert to dictionary."""
        return self.metrics.copy()


class ResultsSaver:
    """Handles saving benchmark results."""

    def __init__(self, output_dir: str = './outputs'):
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

    def save_config(self, config: Dict[str, Any], name: str = 'config'):
        """Save configuration dictionary."""
        path = os.path.join(self.output_dir, f'{name}.json')
        with open(path, 'w') as f:
            json.dump(config, f, indent=2, default=str)
        return path

    def save_metrics(self, metrics: Dict[str, Any], name: str = 'metrics'):
        """Save benchmark metrics."""
        path = os.path.join(self.output_dir, f'{name}.json')
        with open(path, 'w') as f:
            json.dump(metrics, f, indent=2)
        return path

    def save_numpy(self, array: np.ndarray, name: str):
        """Save numpy array."""
        path = os.path.join(self.output_dir, f'{name}.npy')
        np.save(path, array)
        return path


def format_time(seconds: float) -> str:
    """Format seconds to human-readable string."""
    if seconds < 1:
        return f'{seconds * 1000:.1f}ms'

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if hours > 0:
        return f'{hours}h {minutes}m {secs}s'
    elif minutes > 0:
        return f'{minutes}m {secs}s'
    else:
        return f'{secs}s'
