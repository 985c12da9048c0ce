class DiffFormat:
    "Names of the available output formats."
    UNIFIED = "unified"
    SIDE_BY_SIDE = "side-by-side"
    JSON_PATCH = "json-patch"
    SEMANTIC = "semantic"

    ALL = (UNIFIED, SIDE_BY_SIDE, JSON_PATCH, SEMANTIC)


class DiffConfig:
    """Set of options controlling normalization and rendering of a comparison"""

    def __init__(self, *, format=DiffFormat.UNIFIED, ignore_metadata=False,
                 ignore_order=False, context_lines=3, colorize=False,
                 semantic=False):
        if format is None:
            format = DiffFormat.UNIFIED
        if format not in DiffFormat.ALL:
            raise ValueError('Unknown diff format %r. Accepted values are %r.' % (
                format, list(DiffFormat.ALL)))
        if context_lines < 0:
            raise ValueError('context_lines cannot be negative, got %r' % (context_lines,))

        self.format = format
        self.ignore_metadata = bool(ignore_metadata)
        self.ignore_order = bool(ignore_order)
        self.context_lines = context_lines
        self.colorize = bool(colorize)
        self.semantic = bool(semantic)

    @property
    def effective_format(self):
        "The format actually rendered, taking the semantic override into account."
        if self.semantic:
            return DiffFormat.SEMANTIC
        return self.format

    def __copy__(self):
        return DiffConfig(
            format=self.format,
            ignore_metadata=self.ignore_metadata,
            ignore_order=self.ignore_order,
            context_lines=self.context_lines,
            colorize=self.colorize,
            semantic=self.semantic,
        )

    def __repr__(self):
        return ('DiffConfig(format=%r, ignore_metadata=%r, ignore_order=%r, '
                'context_lines=%r, colorize=%r, semantic=%r)' % (
                    self.format, self.ignore_metadata, self.ignore_order,
                    self.context_lines, self.colorize, self.semantic))
