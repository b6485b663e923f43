"""
Command-line runner for crtpaillier.

Sub-commands:
1. keygen    - generate a key pair and write it as JSON
2. encrypt   - encrypt an integer under a stored public key
3. decrypt   - decrypt a ciphertext with a stored private key
4. benchmark - time key generation, encryption and decryption
"""

import os
import sys
import time
import random
import argparse
import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence

import numpy as np

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from crtpaillier.config import DEFAULT_CONFIG, get_config
from crtpaillier.crypto import (
    PaillierError,
    generate_key_pair,
    encrypt,
    decrypt,
    decrypt_textbook
)
from crtpaillier.utils import (
    set_seed,
    setup_logging,
    MetricsTracker,
    ResultsSaver,
    format_time,
    save_key_pair,
    load_public_key,
    load_private_key
)


class PaillierBenchmark:
    """
    Benchmark runner for crtpaillier.

    Times key generation, encryption, CRT decryption and textbook decryption
    for each requested key size and checks every round trip.
    """

    def __init__(
        self,
        key_sizes: Optional[Sequence[int]] = None,
        num_messages: Optional[int] = None,
        seed: Optional[int] = None,
        output_dir: Optional[str] = None,
        parallel_keygen: bool = False
    ):
        """
        Initialize benchmark.

        Args:
            key_sizes: Modulus bit lengths to benchmark
            num_messages: Plaintexts encrypted and decrypted per key size
            seed: Seed for the benchmark plaintexts
            output_dir: Directory for outputs

        Arguments left as None fall back to DEFAULT_CONFIG.benchmark.
            parallel_keygen: Search for p and q concurrently
        """
        defaults = DEFAULT_CONFIG.benchmark
        self.key_sizes = list(key_sizes if key_sizes is not None else defaults.key_sizes)
        self.num_messages = num_messages if num_messages is not None else defaults.num_messages
        self.seed = seed if seed is not None else defaults.seed
        output_dir = output_dir or defaults.output_dir
        self.parallel_keygen = parallel_keygen

        # Create output directory
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        self.output_dir = os.path.join(output_dir, f'benchmark_{timestamp}')
        os.makedirs(self.output_dir, exist_ok=True)

        log_config = DEFAULT_CONFIG.logging
        self.logger = setup_logging(
            os.path.join(self.output_dir, 'logs'),
            getattr(logging, log_config.level),
            log_config.name
        )
        self.results_saver = ResultsSaver(self.output_dir)
        self.metrics_tracker = MetricsTracker()

        self._save_config()

    def _save_config(self):
        """Save benchmark configuration."""
        config = {
            'key_sizes': self.key_sizes,
            'num_messages': self.num_messages,
            'seed': self.seed,
            'parallel_keygen': self.parallel_keygen
        }
        self.results_saver.save_config(config)

    def run(self) -> Dict[str, Dict[str, float]]:
        """
        Execute the benchmark.

        Returns:
            Summary statistics per metric
        """
        if self.seed is not None:
            set_seed(self.seed)

        self.logger.info("=" * 60)
        self.logger.info("Starting Paillier benchmark")
        self.logger.info("=" * 60)

        start_time = time.time()
        for bits in self.key_sizes:
            self._benchmark_key_size(bits)

        elapsed = time.time() - start_time
        summary = self.metrics_tracker.summary()

        self.logger.info("\n" + "=" * 60)
        self.logger.info(f"Benchmark completed in {format_time(elapsed)}")
        self.logger.info("=" * 60)

        self._save_results(summary)
        return summary

    def _benchmark_key_size(self, bits: int):
        self.logger.info(f"\n[{bits} bits] Generating key pair...")
        start = time.time()
        public_key, private_key = generate_key_pair(bits, parallel=self.parallel_keygen)
        self.metrics_tracker.add_scalar(f'keygen_{bits}', time.time() - start)

        plaintexts = [random.randrange(public_key.n) for _ in range(self.num_messages)]

        for m in plaintexts:
            start = time.time()
            c = encrypt(m, public_key)
            self.metrics_tracker.add_scalar(f'encrypt_{bits}', time.time() - start)

            start = time.time()
            m_crt = decrypt(c, private_key)
            self.metrics_tracker.add_scalar(f'decrypt_crt_{bits}', time.time() - start)

            start = time.time()
            m_textbook = decrypt_textbook(c, private_key)
            self.metrics_tracker.add_scalar(f'decrypt_textbook_{bits}', time.time() - start)

            if m_crt != m or m_textbook != m:
                raise RuntimeError(f"round trip failed for a {bits}-bit key")

        crt = self.metrics_tracker.get_mean(f'decrypt_crt_{bits}')
        textbook = self.metrics_tracker.get_mean(f'decrypt_textbook_{bits}')
        self.logger.info(f"  Key generation: {format_time(self.metrics_tracker.get_latest(f'keygen_{bits}'))}")
        self.logger.info(f"  Encryption (mean): {format_time(self.metrics_tracker.get_mean(f'encrypt_{bits}'))}")
        self.logger.info(f"  CRT decryption (mean): {format_time(crt)}")
        self.logger.info(f"  Textbook decryption (mean): {format_time(textbook)}")
        if crt:
            self.logger.info(f"  CRT speedup: {textbook / crt:.2f}x")

    def _save_results(self, summary: Dict[str, Dict[str, float]]):
        """Save benchmark results."""
        self.results_saver.save_metrics(self.metrics_tracker.to_dict(), 'timings')
        self.results_saver.save_metrics(summary, 'summary')
        for name, values in self.metrics_tracker.to_dict().items():
            self.results_saver.save_numpy(np.array(values), name)

        self.logger.info(f"\nResults saved to: {self.output_dir}")


def run_keygen(args: argparse.Namespace) -> int:
    key_pair = generate_key_pair(config=args.config.crypto)
    public_path, private_path = save_key_pair(key_pair, args.out_dir, args.name)
    print(f"Public key:  {public_path}")
    print(f"Private key: {private_path}")
    return 0


def run_encrypt(args: argparse.Namespace) -> int:
    public_key = load_public_key(args.public_key)
    print(encrypt(args.value, public_key))
    return 0


def run_decrypt(args: argparse.Namespace) -> int:
    private_key = load_private_key(args.private_key)
    print(decrypt(args.value, private_key))
    return 0


def run_benchmark(args: argparse.Namespace) -> int:
    benchmark = PaillierBenchmark(
        key_sizes=args.key_sizes,
        num_messages=args.messages,
        seed=args.seed,
        output_dir=args.config.benchmark.output_dir,
        parallel_keygen=args.config.crypto.parallel_keygen
    )
    benchmark.run()
    return 0


def build_config(args: argparse.Namespace):
    """Overlay command-line options on DEFAULT_CONFIG."""
    defaults = DEFAULT_CONFIG
    return get_config(
        key_size=getattr(args, 'bits', defaults.crypto.key_size),
        primality_rounds=defaults.crypto.primality_rounds,
        parallel_keygen=getattr(args, 'parallel', defaults.crypto.parallel_keygen),
        log_level=args.log_level or defaults.logging.level,
        output_dir=getattr(args, 'output_dir', defaults.benchmark.output_dir)
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='crtpaillier: Paillier encryption with CRT decryption'
    )
    parser.add_argument('--log-level', type=str, default=None,
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help='Logging level')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # Key generation
    keygen = subparsers.add_parser('keygen', help='Generate a key pair')
    keygen.add_argument('--bits', type=int, default=DEFAULT_CONFIG.crypto.key_size,
                       help='Modulus bit length')
    keygen.add_argument('--out-dir', type=str, default='./keys',
                       help='Directory for the key files')
    keygen.add_argument('--name', type=str, default='paillier',
                       help='Key file name prefix')
    keygen.add_argument('--parallel', action='store_true',
                       help='Search for p and q concurrently')
    keygen.set_defaults(func=run_keygen)

    # Encryption
    enc = subparsers.add_parser('encrypt', help='Encrypt an integer')
    enc.add_argument('--public-key', type=str, required=True,
                    help='Path to the public key JSON file')
    enc.add_argument('--value', type=int, required=True,
                    help='Plaintext integer in [0, n)')
    enc.set_defaults(func=run_encrypt)

    # Decryption
    dec = subparsers.add_parser('decrypt', help='Decrypt a ciphertext')
    dec.add_argument('--private-key', type=str, required=True,
                    help='Path to the private key JSON file')
    dec.add_argument('--value', type=int, required=True,
                    help='Ciphertext integer in [0, n^2)')
    dec.set_defaults(func=run_decrypt)

    # Benchmark
    bench = subparsers.add_parser('benchmark', help='Time the primitives')
    bench.add_argument('--key-sizes', type=int, nargs='+', default=DEFAULT_CONFIG.benchmark.key_sizes,
                      help='Modulus bit lengths to benchmark')
    bench.add_argument('--messages', type=int,
                      default=DEFAULT_CONFIG.benchmark.num_messages,
                      help='Plaintexts per key size')
    bench.add_argument('--seed', type=int, default=DEFAULT_CONFIG.benchmark.seed,
                      help='Seed for benchmark plaintexts')
    bench.add_argument('--output-dir', type=str,
                      default=DEFAULT_CONFIG.benchmark.output_dir,
                      help='Output directory')
    bench.add_argument('--parallel', action='store_true',
                      help='Search for p and q concurrently')
    bench.set_defaults(func=run_benchmark)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.config = build_config(args)
        log_config = args.config.logging
        setup_logging(log_config.log_dir, getattr(logging, log_config.level), log_config.name)
        return args.func(args)
    except (PaillierError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
