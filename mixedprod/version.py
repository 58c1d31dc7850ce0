from pathlib import Path

try:
    from importlib.metadata import PackageNotFoundError, version
except ImportError:
    from importlib_metadata import PackageNotFoundError, version  # type: ignore

try:
    __version__ = version("mixedprod")
except PackageNotFoundError:
    # running from a source tree that is not installed
    import versioningit

    pyprojectpath = Path(__file__).resolve().parent.parent
    __version__ = versioningit.get_version(project_dir=pyprojectpath)
