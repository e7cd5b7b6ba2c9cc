"""Tests for viewer address fingerprints."""

import pytest

from app.domain.watch.ip_fingerprint import fingerprints_match, hash_ip
from app.utils.app_errors import AppError, AppErrorCode


class TestHashIp:
    def test_same_address_and_secret_gives_same_fingerprint(self):
        assert hash_ip("10.0.0.1", "secret") == hash_ip("10.0.0.1", "secret")

    def test_different_addresses_give_different_fingerprints(self):
        assert hash_ip("10.0.0.1", "secret") != hash_ip("10.0.0.99", "secret")

    def test_secret_namespaces_fingerprints(self):
        assert hash_ip("10.0.0.1", "deployment-a") != hash_ip("10.0.0.1", "deployment-b")

    def test_fingerprint_does_not_contain_address(self):
        fingerprint = hash_ip("192.168.1.20", "secret")

        assert "192.168.1.20" not in fingerprint
        assert len(fingerprint) == 64
        int(fingerprint, 16)

    def test_surrounding_whitespace_is_ignored(self):
        assert hash_ip(" 10.0.0.1\n", "secret") == hash_ip("10.0.0.1", "secret")

    def test_ipv6_addresses_are_supported(self):
        assert hash_ip("2001:db8::1", "secret") != hash_ip("2001:db8::2", "secret")

    def test_empty_secret_is_rejected(self):
        with pytest.raises(AppError) as exc_info:
            hash_ip("10.0.0.1", "")
        assert exc_info.value.errcode == AppErrorCode.E_INVALID_CONFIG


def test_fingerprints_match():
    fingerprint = hash_ip("10.0.0.1", "secret")

    assert fingerprints_match(fingerprint, hash_ip("10.0.0.1", "secret"))
    assert not fingerprints_match(fingerprint, hash_ip("10.0.0.2", "secret"))
