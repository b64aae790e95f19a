from classlint.resolvers.batch import ResolverContractError, resolve_declarations, resolve_ranks
from classlint.resolvers.manifest import ManifestEntry, ManifestError, ManifestResolver, load_manifest

__all__ = [
    "ResolverContractError",
    "resolve_declarations",
    "resolve_ranks",
    "ManifestEntry",
    "ManifestError",
    "ManifestResolver",
    "load_manifest",
]
