# facsdensity/core/dependencies.py
import importlib.util

from facsdensity.core.errors import MissingDependencyError

# import name -> pip install hint
REQUIRED_PACKAGES = {
    "flowkit": "pip install flowkit",
    "pandas": "pip install pandas",
    "numpy": "pip install numpy",
    "matplotlib": "pip install matplotlib",
    "scipy": "pip install scipy",
}


def check_dependencies(requirements=None):
    """
    Fail fast when a package the pipeline needs cannot be imported.

    requirements: mapping of import name -> install hint; defaults to
    REQUIRED_PACKAGES. All missing packages are reported at once.
    """
    if requirements is None:
        requirements = REQUIRED_PACKAGES

    missing = [name for name in requirements if importlib.util.find_spec(name) is None]
    if missing:
        lines = []
        for name in missing:
            lines.append(f'Requires package "{name}". Please install it:')
            lines.append(f"    {requirements[name]}")
        raise MissingDependencyError("\n".join(lines))
