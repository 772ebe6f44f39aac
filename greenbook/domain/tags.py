"""Tag parsing and aggregation."""

from typing import Dict, Iterable, List, Optional

from greenbook.domain.models import Fav


def parse_tags(text: Optional[str]) -> List[str]:
    """Split a space-separated tag string into a list of tags.

    Blank tokens are dropped and repeated tags are kept once, in the order
    they first appear. ``None`` and empty strings give an empty list.
    """
    if not text:
        return []
    return list(dict.fromkeys(text.split()))


def _id_key(fav: Fav):
    return (0, int(fav.id), "") if fav.id.isdigit() else (1, 0, fav.id)


def count_tags(favs: Iterable[Fav]) -> Dict[str, int]:
    """Count how many of ``favs`` carry each tag.

    Every tag on every fav is counted, not only tags that were used to
    select the favs. Keys are ordered by first appearance, walking the
    favs in ascending id order.
    """
    counts: Dict[str, int] = {}
    for fav in sorted(favs, key=_id_key):
        for tag in fav.tags:
            counts[tag] = counts.get(tag, 0) + 1
    return counts
