"""
Tests for the JSON-lines audit trail.
"""

from concurrent.futures import ThreadPoolExecutor

from propper.audit.logger import AuditLogger
from propper.models.audit_models import AuditEntry


def _entry(score):
    return AuditEntry(
        component_id="1:2",
        component_name="Button/Primary",
        component_type="Button",
        score=score,
        findings=1,
        errors=0,
    )


def test_log_and_read_back(tmp_path):
    audit = AuditLogger(tmp_path / "audit.jsonl")
    audit.log(_entry(90))
    audit.log(_entry(40))
    entries = audit.read_recent()
    assert [e["score"] for e in entries] == [90, 40]
    assert entries[0]["component_type"] == "Button"


def test_read_recent_limits_and_skips_corrupt_lines(tmp_path):
    path = tmp_path / "audit.jsonl"
    audit = AuditLogger(path)
    for score in range(5):
        audit.log(_entry(score))
    with open(path, "a") as f:
        f.write("not json\n\n")
    assert [e["score"] for e in audit.read_recent(2)] == [3, 4]


def test_missing_log_reads_empty(tmp_path):
    assert AuditLogger(tmp_path / "none.jsonl").read_recent() == []


def test_unwritable_log_does_not_raise(tmp_path):
    audit = AuditLogger(tmp_path / "missing-dir" / "audit.jsonl")
    audit.log(_entry(10))
    assert audit.read_recent() == []


def test_concurrent_appends_keep_every_line(tmp_path):
    audit = AuditLogger(tmp_path / "audit.jsonl")
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda score: audit.log(_entry(score)), range(40)))
    entries = audit.read_recent(100)
    assert sorted(e["score"] for e in entries) == list(range(40))
    assert all(e["timestamp"].endswith("Z") for e in entries)
