import os

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .diffing.config import DiffFormat


CONFIG_BASENAME = 'treediff_config'


class TreediffConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def config_path():
    """Directories searched for config files, highest priority first."""
    return [
        os.getcwd(),
        os.path.join(os.path.expanduser('~'), '.treediff'),
    ]


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False, path=None):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    if path is None:
        path = config_path()
    for c in _load_config_files(CONFIG_BASENAME, path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, TreediffConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(TreediffConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Diff(TreediffConfigurable):

    format = Enum(
        DiffFormat.ALL,
        DiffFormat.UNIFIED,
        help="Output format of the diff.",
    ).tag(config=True)

    ignore_metadata = Bool(
        False,
        help="strip timestamps, versions and similar metadata fields before diffing.",
    ).tag(config=True)

    ignore_order = Bool(
        False,
        help="sort lists of items keyed by id, name or key before diffing.",
    ).tag(config=True)

    context_lines = Integer(
        3,
        help="number of context lines (reserved, the unified output has none).",
    ).tag(config=True)

    colorize = Bool(
        False,
        help="colorize unified and side-by-side output.",
    ).tag(config=True)

    semantic = Bool(
        False,
        help="always print the semantic report, whatever the format.",
    ).tag(config=True)


class TreeDiff(Global, Diff):
    pass


entrypoint_configurables = {
    'treediff': TreeDiff,
}
