import base64
import json
import os
import stat
import sys

import pytest

from jssdk_signer.src.errors import CacheWriteError
from jssdk_signer.src.models import TicketRecord
from jssdk_signer.src.services.ticket_cache import FileTicketStore, decode_record, encode_record

KEY = "900150983cd24fb0d6963f7d28e17f72"
RECORD = TicketRecord(access_token="tok", ticket="tkt", obtained_at=1_700_000_000)


def test_round_trip(tmp_path):
    store = FileTicketStore(tmp_path)
    store.write(KEY, RECORD)
    assert (tmp_path / KEY).exists()
    assert store.read(KEY) == RECORD


def test_payload_format_is_base64_json(tmp_path):
    FileTicketStore(tmp_path).write(KEY, RECORD)
    payload = json.loads(base64.b64decode((tmp_path / KEY).read_text()))
    assert payload == {"access_token": "tok", "ticket": "tkt", "time": 1_700_000_000}


def test_read_missing_is_none(tmp_path):
    assert FileTicketStore(tmp_path).read(KEY) is None


@pytest.mark.parametrize("raw", [
    "not base64 !!!",
    base64.b64encode(b"not json").decode(),
    base64.b64encode(json.dumps({"ticket": "x"}).encode()).decode(),
    base64.b64encode(json.dumps(["a", "b"]).encode()).decode(),
    "",
    b"\xff\xfe\x00garbage",
    "\u00e9\u00e9\u00e9\u00e9",
])
def test_undecodable_payload_is_a_miss(tmp_path, raw):
    if isinstance(raw, bytes):
        (tmp_path / KEY).write_bytes(raw)
    else:
        (tmp_path / KEY).write_text(raw, encoding="utf-8")
    assert FileTicketStore(tmp_path).read(KEY) is None


def test_write_to_missing_directory(tmp_path):
    store = FileTicketStore(tmp_path / "nope")
    with pytest.raises(CacheWriteError) as exc:
        store.write(KEY, RECORD)
    assert exc.value.code == 5004


@pytest.mark.skipif(sys.platform == "win32" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
def test_write_to_read_only_directory(tmp_path):
    tmp_path.chmod(stat.S_IRUSR | stat.S_IXUSR)
    try:
        with pytest.raises(CacheWriteError):
            FileTicketStore(tmp_path).write(KEY, RECORD)
    finally:
        tmp_path.chmod(stat.S_IRWXU)


def test_is_fresh_boundary():
    store = FileTicketStore()
    assert store.is_fresh(RECORD, RECORD.obtained_at) is True
    assert store.is_fresh(RECORD, RECORD.obtained_at + 7199) is True
    assert store.is_fresh(RECORD, RECORD.obtained_at + 7200) is False
    assert store.is_fresh(RECORD, RECORD.obtained_at + 10_000) is False
    assert store.is_fresh(None, RECORD.obtained_at) is False


def test_custom_ttl():
    store = FileTicketStore(ticket_ttl=60)
    assert store.is_fresh(RECORD, RECORD.obtained_at + 59)
    assert not store.is_fresh(RECORD, RECORD.obtained_at + 60)


def test_encode_decode_helpers():
    assert decode_record(encode_record(RECORD)) == RECORD
