"""Second-pass resolution of data resource addresses."""

from __future__ import annotations

from .models import DataResource, FileLocation, PendingResourceFile
from .registry import PackageRegistry


def resolve_resource(
    pending: PendingResourceFile, registry: PackageRegistry
) -> DataResource | None:
    """Attach ``pending`` to the leaf-most registered package enclosing it.

    Python's resource readers address ``foo/bar/resource.txt`` as
    ``resource.txt`` on package ``foo.bar``, as ``bar/resource.txt`` on
    ``foo`` when ``foo.bar`` is not a package, and so on. The full relative
    path stays the canonical identifier; the leaf package and the name relative
    to it are annotations. Returns ``None`` when no enclosing package exists,
    in which case the file is not addressable as a resource.

    Must only run once the walk has finished, because a package may be declared
    by a file that sorts after the resource.
    """
    relative_path = pending.relative_path
    full_name = relative_path.as_posix()

    directories = list(relative_path.parent.parts)
    relative_parts = [relative_path.name]

    while True:
        candidate = ".".join(directories)
        if candidate in registry:
            relative_parts.reverse()
            return DataResource(
                full_name=full_name,
                leaf_package=candidate,
                relative_name="/".join(relative_parts),
                location=FileLocation(pending.full_path),
            )
        if not directories:
            return None
        relative_parts.append(directories.pop())


__all__ = ["resolve_resource"]
