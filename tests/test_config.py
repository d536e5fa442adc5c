"""Tests for the generator configuration objects."""

import dataclasses

import pytest

from otp_utils.config import HmacOneTimePasswordConfig, TimeBasedOneTimePasswordConfig, TimeUnit
from otp_utils.hmac_algorithm import HmacAlgorithm


def test_hmac_algorithm_digest_lengths():
    assert HmacAlgorithm.SHA1.hash_bytes == 20
    assert HmacAlgorithm.SHA256.hash_bytes == 32
    assert HmacAlgorithm.SHA512.hash_bytes == 64
    for algorithm in HmacAlgorithm:
        assert algorithm.hash_algorithm().digest_size == algorithm.hash_bytes
        assert algorithm.hash_algorithm().name == algorithm.hash_name


def test_hmac_algorithm_from_name():
    assert HmacAlgorithm.from_name("SHA1") is HmacAlgorithm.SHA1
    assert HmacAlgorithm.from_name("sha-256") is HmacAlgorithm.SHA256
    assert HmacAlgorithm.from_name(" sha512 ") is HmacAlgorithm.SHA512
    with pytest.raises(ValueError):
        HmacAlgorithm.from_name("md5")


def test_negative_code_digits_rejected():
    with pytest.raises(ValueError):
        HmacOneTimePasswordConfig(-1, HmacAlgorithm.SHA1)
    assert HmacOneTimePasswordConfig(0, HmacAlgorithm.SHA1).code_digits == 0


def test_algorithm_name_is_accepted():
    config = HmacOneTimePasswordConfig(6, "sha256")
    assert config.hmac_algorithm is HmacAlgorithm.SHA256


def test_non_integer_values_rejected():
    with pytest.raises(TypeError):
        HmacOneTimePasswordConfig(6.0, HmacAlgorithm.SHA1)
    with pytest.raises(TypeError):
        HmacOneTimePasswordConfig(True, HmacAlgorithm.SHA1)
    with pytest.raises(TypeError):
        TimeBasedOneTimePasswordConfig(0.5, TimeUnit.SECONDS, 6, HmacAlgorithm.SHA1)
    with pytest.raises(TypeError):
        TimeBasedOneTimePasswordConfig(30, TimeUnit.SECONDS, 6.0, HmacAlgorithm.SHA1)


def test_negative_time_step_rejected():
    with pytest.raises(ValueError):
        TimeBasedOneTimePasswordConfig(-1, TimeUnit.SECONDS, 6, HmacAlgorithm.SHA1)


def test_time_based_config_embeds_hmac_config():
    config = TimeBasedOneTimePasswordConfig(2, TimeUnit.MINUTES, 8, "SHA512")
    assert config.hmac_algorithm is HmacAlgorithm.SHA512
    assert config.hmac_config == HmacOneTimePasswordConfig(8, HmacAlgorithm.SHA512)
    assert config.time_step_millis == 120_000


def test_configs_are_immutable():
    config = TimeBasedOneTimePasswordConfig(30, TimeUnit.SECONDS, 6, HmacAlgorithm.SHA1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.code_digits = 8
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.hmac_config.code_digits = 8


def test_time_unit_conversions():
    assert TimeUnit.SECONDS.to_millis(30) == 30_000
    assert TimeUnit.DAYS.to_millis(1) == 86_400_000
    assert TimeUnit.MINUTES.to_seconds(10) == 600
    assert TimeUnit.MILLISECONDS.to_seconds(1_999) == 1


def run():
    test_hmac_algorithm_digest_lengths()
    test_hmac_algorithm_from_name()
    test_negative_code_digits_rejected()
    test_algorithm_name_is_accepted()
    test_non_integer_values_rejected()
    test_negative_time_step_rejected()
    test_time_based_config_embeds_hmac_config()
    test_configs_are_immutable()
    test_time_unit_conversions()
    print("test_config: all checks passed.")


if __name__ == "__main__":
    run()
