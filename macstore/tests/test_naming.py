from __future__ import annotations

import pytest

from macstore.config import settings
from macstore.errors import InvalidRecordKeyError
from macstore.naming import (
    NOT_A_RECORD,
    PodRecord,
    decode_record_name,
    encode_record_name,
    validate_record_key,
)


def test_encode_full_key() -> None:
    assert encode_record_name("0a:58:0a:f4:00:05", "default", "web-0") == (
        "mac_0a:58:0a:f4:00:05_default_web-0"
    )


@pytest.mark.parametrize(
    "mac,namespace",
    [("", "default"), ("0a:58:0a:f4:00:05", ""), ("", "")],
)
def test_encode_without_mac_or_namespace_returns_name(mac: str, namespace: str) -> None:
    assert encode_record_name(mac, namespace, "web-0") == "web-0"


def test_decode_round_trips_encoded_name() -> None:
    name = encode_record_name("0a:58:0a:f4:00:05", "kube-system", "coredns-7d8f")
    assert decode_record_name(name) == PodRecord("0a:58:0a:f4:00:05", "kube-system", "coredns-7d8f")


@pytest.mark.parametrize(
    "filename",
    ["lock", "mac_0a:58:0a:f4:00:05_default", "mac_a_b_c_d", "", "10.1.2.3"],
)
def test_decode_non_record_names(filename: str) -> None:
    record = decode_record_name(filename)
    assert record == NOT_A_RECORD
    assert not record.is_record


def test_decode_does_not_check_prefix() -> None:
    record = decode_record_name("ip_10.0.0.1_default_web-0")
    assert record.is_record
    assert record.mac == "10.0.0.1"


def test_record_filename_property() -> None:
    record = PodRecord(mac="aa:bb:cc:dd:ee:ff", namespace="ns", name="pod")
    assert record.filename == "mac_aa:bb:cc:dd:ee:ff_ns_pod"


def test_underscore_in_name_desynchronizes_grammar() -> None:
    name = encode_record_name("aa:bb:cc:dd:ee:ff", "ns", "my_pod")
    assert decode_record_name(name) == NOT_A_RECORD


@pytest.mark.parametrize(
    "mac,namespace,name",
    [("aa_bb", "ns", "pod"), ("aa:bb", "my_ns", "pod"), ("aa:bb", "ns", "my_pod")],
)
def test_validate_rejects_separator(mac: str, namespace: str, name: str) -> None:
    with pytest.raises(InvalidRecordKeyError):
        validate_record_key(mac, namespace, name)


def test_validate_can_be_disabled(monkeypatch) -> None:
    monkeypatch.setattr(settings, "reject_separator_in_keys", False)
    validate_record_key("aa:bb", "ns", "my_pod")


@pytest.mark.parametrize("mac,namespace", [("", "ns"), ("aa:bb", ""), ("", "")])
def test_validate_requires_mac_and_namespace(mac: str, namespace: str) -> None:
    with pytest.raises(InvalidRecordKeyError):
        validate_record_key(mac, namespace, "pod")


def test_missing_namespace_rejected_even_when_separator_allowed(monkeypatch) -> None:
    monkeypatch.setattr(settings, "reject_separator_in_keys", False)
    with pytest.raises(InvalidRecordKeyError):
        validate_record_key("aa:bb", "", "pod")
