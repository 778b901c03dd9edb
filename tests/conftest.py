"""
Shared fixtures for duplicate mail tests.
Creates isolated temporary Maildir trees with controlled mail files.
"""
import pytest
from pathlib import Path
from typing import Dict, List


def make_mail(headers: List[str], body: str, newline: str = "\n") -> bytes:
    """
    Build a raw mail: header lines, then the two blank lines that end the
    header block, then the body.
    """
    head = "".join(f"{header}{newline}" for header in headers)
    return (head + newline + newline + body).encode("utf-8")


@pytest.fixture
def maildir(tmp_path) -> Dict[str, Path]:
    """
    Creates a small Maildir:
    - cur/1 and cur/2: same body, different headers, different Message-IDs
    - new/3: unique body
    - .hidden and .Trash/cur/4: hidden entries, copies of cur/1 that must never be visited
    """
    root = tmp_path / "Maildir"
    for sub in ("cur", "new", "tmp"):
        (root / sub).mkdir(parents=True)

    body = "Hello Bob,\nsee you tomorrow.\n"
    files = {"root": root}

    files["cur1"] = root / "cur" / "1"
    files["cur1"].write_bytes(make_mail(
        ["From: alice@example.com", "Subject: Meeting", "Message-ID: <one@example.com>"], body))

    files["cur2"] = root / "cur" / "2"
    files["cur2"].write_bytes(make_mail(
        ["From: alice@example.com", "Subject: Fwd: Meeting", "Message-ID: <two@example.com>"], body))

    files["new3"] = root / "new" / "3"
    files["new3"].write_bytes(make_mail(
        ["From: carol@example.com", "Subject: Other", "Message-ID: <three@example.com>"],
        "Something else entirely.\n"))

    files["hidden"] = root / ".hidden"
    files["hidden"].write_bytes(files["cur1"].read_bytes())

    trash = root / ".Trash" / "cur"
    trash.mkdir(parents=True)
    files["trash4"] = trash / "4"
    files["trash4"].write_bytes(files["cur1"].read_bytes())

    return files


@pytest.fixture
def message_id_maildir(tmp_path) -> Dict[str, Path]:
    """
    Maildir for Message-ID mode:
    - a, b, c: same Message-ID, different bodies
    - d: unique Message-ID
    - e: no Message-ID header at all
    """
    root = tmp_path / "Maildir"
    (root / "cur").mkdir(parents=True)
    files = {"root": root}

    for name, message_id, body in [
        ("a", "<same@example.com>", "first"),
        ("b", "<same@example.com>", "second"),
        ("c", "<same@example.com>", "third"),
        ("d", "<unique@example.com>", "fourth"),
    ]:
        files[name] = root / "cur" / name
        files[name].write_bytes(make_mail([f"Message-ID: {message_id}", "Subject: x"], body))

    files["e"] = root / "cur" / "e"
    files["e"].write_bytes(make_mail(["Subject: no id here"], "fifth"))

    return files
