import struct
from array import array

import pytest

from seo_notices.adapters.formatting import TEXT_DOMAIN
from seo_notices.core.settings_errors import TITLE_ERRORS_PLURAL, TITLE_ERRORS_SINGULAR

DUTCH = {
    "Remove this message": "Verwijder dit bericht",
    (TITLE_ERRORS_SINGULAR, TITLE_ERRORS_PLURAL): (
        "Het formulier bevat %(count)s fout. %(title)s",
        "Het formulier bevat %(count)s fouten. %(title)s",
    ),
}


def write_catalog(localedir, language, messages):
    """Write a compiled gettext catalog (same layout msgfmt produces)."""
    entries = {}
    for key, value in messages.items():
        if isinstance(key, tuple):
            entries["\x00".join(key).encode()] = "\x00".join(value).encode()
        else:
            entries[key.encode()] = value.encode()

    keys = sorted(entries)
    ids = strs = b""
    offsets = []
    for key in keys:
        offsets.append((len(ids), len(key), len(strs), len(entries[key])))
        ids += key + b"\x00"
        strs += entries[key] + b"\x00"

    keystart = 7 * 4 + 16 * len(keys)
    valuestart = keystart + len(ids)
    koffsets = []
    voffsets = []
    for o1, l1, o2, l2 in offsets:
        koffsets += [l1, o1 + keystart]
        voffsets += [l2, o2 + valuestart]

    output = struct.pack("Iiiiiii", 0x950412DE, 0, len(keys), 7 * 4, 7 * 4 + len(keys) * 8, 0, 0)
    output += array("i", koffsets + voffsets).tobytes() + ids + strs

    target = localedir / language / "LC_MESSAGES"
    target.mkdir(parents=True)
    (target / f"{TEXT_DOMAIN}.mo").write_bytes(output)


@pytest.fixture
def dutch_localedir(tmp_path):
    localedir = tmp_path / "locale"
    write_catalog(localedir, "nl", DUTCH)
    return localedir
