"""Tests for RandomSecretGenerator."""

import pytest

from otp_utils.hmac_algorithm import HmacAlgorithm
from otp_utils.random_secret import RandomSecretGenerator


def test_secret_length_matches_algorithm_digest():
    generator = RandomSecretGenerator()
    for algorithm in HmacAlgorithm:
        assert len(generator.create_random_secret(algorithm)) == algorithm.hash_bytes


def test_explicit_length():
    generator = RandomSecretGenerator()
    assert len(generator.create_random_secret(10)) == 10
    assert generator.create_random_secret(0) == b""


def test_secrets_differ():
    generator = RandomSecretGenerator()
    assert generator.create_random_secret(32) != generator.create_random_secret(32)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        RandomSecretGenerator().create_random_secret(-1)


def run():
    test_secret_length_matches_algorithm_digest()
    test_explicit_length()
    test_secrets_differ()
    test_negative_length_rejected()
    print("test_random_secret: all checks passed.")


if __name__ == "__main__":
    run()
