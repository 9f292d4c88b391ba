"""Pattern demos. Each sub-package exports a ``<Name>Demo`` class."""
