"""tagsift - filter ctags output down to the tags used in an editor buffer."""

__version__ = "1.0.0"
