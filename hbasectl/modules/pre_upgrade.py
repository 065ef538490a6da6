"""
Pre-upgrade validations for moving a cluster from HBase 1.x to 2.0.

Available validations:
    validateDBE: Check Data Block Encoding for column families
"""
import logging
from collections import OrderedDict
from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from hbasectl.modules.encoding import parse_encoding
from hbasectl.modules.hbase import HBaseAdmin

logger = logging.getLogger(__name__)

DATA_BLOCK_ENCODING = "DATA_BLOCK_ENCODING"
PREFIX_TREE_REMOVED_URL = "http://hbase.apache.org/book.html#upgrade2.0.prefix-tree.removed"

AdminFactory = Callable[[], HBaseAdmin]


@dataclass
class Incompatibility:
    """A column family that would not work after the upgrade."""
    table: str
    family: str
    encoding: str


@dataclass
class ValidationResult:
    """Outcome of one pre-upgrade validation."""
    name: str
    compatible: bool
    incompatible_count: int = 0
    incompatibilities: List[Incompatibility] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return asdict(self)


def validate_dbe(admin_factory: AdminFactory = HBaseAdmin) -> ValidationResult:
    """
    Check DataBlockEncodings for column families.

    Every column family is checked; all offenders are logged before the
    summary.

    Args:
        admin_factory: Callable returning an unconnected HBaseAdmin

    Returns:
        ValidationResult; compatible is True when every encoding is
        supported by HBase 2.0

    Raises:
        HBaseError: if the cluster cannot be reached or listing fails
    """
    incompatibilities = []

    logger.info("Validating Data Block Encodings")

    with admin_factory() as admin:
        for td in admin.list_table_descriptors():
            for cfd in td.column_families:
                raw = cfd.get_value(DATA_BLOCK_ENCODING)
                if parse_encoding(raw) is not None:
                    continue
                encoding = raw.decode("utf-8", errors="replace")
                incompatibilities.append(Incompatibility(td.name, cfd.name, encoding))
                logger.warning(
                    f"Incompatible DataBlockEncoding for table: {td.name}, "
                    f"cf: {cfd.name}, encoding: {encoding}"
                )

    count = len(incompatibilities)
    if count > 0:
        logger.warning(
            f"There are {count} column families with incompatible Data Block Encodings. "
            "Do not upgrade until these encodings are converted to a supported one."
        )
        logger.warning(f"Check {PREFIX_TREE_REMOVED_URL} for instructions.")
    else:
        logger.info("The used Data Block Encodings are compatible with HBase 2.0.")

    return ValidationResult(
        name="validateDBE",
        compatible=count == 0,
        incompatible_count=count,
        incompatibilities=incompatibilities,
    )


# Registered checks, run in this order by --all
VALIDATIONS: "OrderedDict[str, Callable[[AdminFactory], ValidationResult]]" = OrderedDict([
    ("validateDBE", validate_dbe),
])


def select_validations(run_all: bool = False, names: Optional[Iterable[str]] = None) -> List[str]:
    """Resolve the requested checks to registry names, in registry order."""
    if run_all:
        return list(VALIDATIONS)
    requested = set(names or [])
    unknown = requested - set(VALIDATIONS)
    if unknown:
        raise ValueError(f"Unknown validation(s): {', '.join(sorted(unknown))}")
    return [name for name in VALIDATIONS if name in requested]


def run_validations(names: Iterable[str], admin_factory: AdminFactory = HBaseAdmin) -> List[ValidationResult]:
    """Run the named checks and return their results."""
    results = []
    for name in names:
        logger.debug(f"Running validation {name}")
        results.append(VALIDATIONS[name](admin_factory))
    return results


def all_passed(results: Iterable[ValidationResult]) -> bool:
    return all(r.compatible for r in results)
