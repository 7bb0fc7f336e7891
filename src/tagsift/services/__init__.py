"""Service layer for tagsift.

Example usage:

    from tagsift.services import FilterRequest, filter_tags

    request = FilterRequest(language="C", order="fc", skip=["bar"])
    for entry in filter_tags(request, lines, buffer):
        print(entry.kind, entry.name)
"""

from .filtering import FilterRequest, filter_tags

__all__ = [
    "FilterRequest",
    "filter_tags",
]
