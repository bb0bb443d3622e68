import dataclasses
import os
import platform
import select
import socket

import pytest

from daytime.features import PlatformFeatures, detect_features


def test_detect_reflects_socket_module():
    features = detect_features()
    assert features.ipv4 == hasattr(socket, "AF_INET")
    assert features.unix_domain == hasattr(socket, "AF_UNIX")
    assert features.multicast == hasattr(socket, "IP_ADD_MEMBERSHIP")
    assert features.sctp == hasattr(socket, "IPPROTO_SCTP")
    assert features.poll == hasattr(select, "poll")
    assert features.kqueue == hasattr(select, "kqueue")


def test_as_dict_matches_fields():
    features = detect_features()
    data = features.as_dict()
    names = [field.name for field in dataclasses.fields(PlatformFeatures)]
    assert list(data) == names
    for name in names:
        assert data[name] == getattr(features, name)


def test_as_dict_is_independent_copy():
    features = detect_features()
    data = features.as_dict()
    data["ipv4"] = "changed"
    assert features.ipv4 != "changed"
    assert features.as_dict()["ipv4"] == features.ipv4


def test_features_are_frozen():
    features = detect_features()
    original = features.ipv4
    with pytest.raises(dataclasses.FrozenInstanceError):
        features.ipv4 = not original
    assert features.ipv4 == original


def test_round_trip_through_dict():
    features = detect_features()
    assert PlatformFeatures(**features.as_dict()) == features


def test_unix_domain_missing(monkeypatch):
    monkeypatch.delattr(socket, "AF_UNIX", raising=False)
    assert detect_features().unix_domain is False


def test_ipv6_disabled(monkeypatch):
    monkeypatch.setattr(socket, "has_ipv6", False)
    assert detect_features().ipv6 is False


def test_poll_missing(monkeypatch):
    monkeypatch.delattr(select, "poll", raising=False)
    assert detect_features().poll is False


def test_cpu_vendor_os_from_platform(monkeypatch):
    monkeypatch.setattr(platform, "machine", lambda: "sparc")
    monkeypatch.setattr(platform, "system", lambda: "SunOS")
    assert detect_features().cpu_vendor_os == "sparc-sunos"


def test_cpu_vendor_os_unknown(monkeypatch):
    monkeypatch.setattr(platform, "machine", lambda: "")
    monkeypatch.setattr(platform, "system", lambda: "")
    assert detect_features().cpu_vendor_os == "unknown-unknown"


def test_stream_devices_detected(monkeypatch):
    present = {"/dev/tcp", "/dev/streams/xtiso/tcp"}
    monkeypatch.setattr(os.path, "exists", lambda path: path in present)
    features = detect_features()
    assert features.dev_tcp is True
    assert features.dev_xti_tcp is False
    assert features.dev_streams_xtiso_tcp is True