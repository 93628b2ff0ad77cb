# Word-level diff between two versions of a text.
#
# A greedy two-cursor aligner, not a minimal edit script.
# On a mismatch the token whose counterpart reappears sooner decides the
# classification; ties classify the original token as removed.

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

RunKind = Literal["unchanged", "added", "removed"]


@dataclass(frozen=True)
class DiffRun:
    text: str
    kind: RunKind

    def to_payload(self) -> dict[str, object]:
        return {"text": self.text, "kind": self.kind}


def _next_index(tokens: list[str], token: str, start: int) -> int:
    """Distance from ``start`` to the next ``token``, or -1."""
    for k in range(start, len(tokens)):
        if tokens[k] == token:
            return k - start
    return -1


def _align(a: list[str], b: list[str]) -> list[tuple[str, RunKind]]:
    out: list[tuple[str, RunKind]] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] == b[j]:
            out.append((a[i], "unchanged"))
            i += 1
            j += 1
            continue
        # How far ahead the modified token shows up again in the original, and vice versa.
        b_in_a = _next_index(a, b[j], i + 1)
        a_in_b = _next_index(b, a[i], j + 1)
        if b_in_a != -1 and (a_in_b == -1 or b_in_a <= a_in_b):
            out.append((a[i], "removed"))
            i += 1
        else:
            out.append((b[j], "added"))
            j += 1
    if i < len(a):
        out.append((" ".join(a[i:]), "removed"))
    if j < len(b):
        out.append((" ".join(b[j:]), "added"))
    return out


def _merge(tokens: list[tuple[str, RunKind]]) -> list[DiffRun]:
    runs: list[DiffRun] = []
    for text, kind in tokens:
        if runs and runs[-1].kind == kind:
            runs[-1] = DiffRun(runs[-1].text + " " + text, kind)
        else:
            runs.append(DiffRun(text, kind))
    return runs


def diff_texts(original: str | None, modified: str | None) -> list[DiffRun]:
    """Classify whitespace-separated tokens of two texts as unchanged, added, or removed.

    Joining the runs that are not ``removed`` gives ``modified`` with its
    whitespace normalized; joining the runs that are not ``added`` gives
    ``original`` the same way.
    """
    return _merge(_align((original or "").split(), (modified or "").split()))


def reconstruct(runs: list[DiffRun], side: Literal["original", "modified"]) -> str:
    skip = "added" if side == "original" else "removed"
    return " ".join(r.text for r in runs if r.kind != skip)
