"""Genesis records: models, allocation, fork editing and import/export."""

from .alloc import PRECOMPILE_COUNT, PREFUND_BALANCE, AllocationBuilder
from .forks import edit_forks
from .genesis import DEFAULT_DIFFICULTY, DEFAULT_GAS_LIMIT, Genesis, GenesisAccount, GenesisAlloc
from .io import (
    default_export_name,
    export_genesis,
    fetch_genesis_document,
    import_genesis,
    save_genesis,
)

__all__ = [
    "AllocationBuilder",
    "DEFAULT_DIFFICULTY",
    "DEFAULT_GAS_LIMIT",
    "Genesis",
    "GenesisAccount",
    "GenesisAlloc",
    "PRECOMPILE_COUNT",
    "PREFUND_BALANCE",
    "default_export_name",
    "edit_forks",
    "export_genesis",
    "fetch_genesis_document",
    "import_genesis",
    "save_genesis",
]
