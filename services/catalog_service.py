import contextlib
import importlib
import io
import logging
import threading
from typing import List, Optional

from app.exceptions import NotFoundError
from domain.enums import PatternGroup
from patterns.catalog import EXAMPLES, CatalogEntry

logger = logging.getLogger("patterns.catalog")

# stdout redirection is process-wide, so runs are serialized
_run_lock = threading.Lock()


class CatalogService:
    """Listing, describing and running catalog examples"""

    @staticmethod
    def list_examples(group: Optional[PatternGroup] = None) -> List[CatalogEntry]:
        entries = list(EXAMPLES.values())
        if group is not None:
            entries = [e for e in entries if e.group == group]
        return entries

    @staticmethod
    def get_example(slug: str) -> CatalogEntry:
        entry = EXAMPLES.get(slug)
        if entry is None:
            logger.warning(f"example_not_found slug={slug}")
            raise NotFoundError(
                f"Example '{slug}' not found",
                details={"slug": slug},
                code="EXAMPLE_NOT_FOUND",
            )
        return entry

    @staticmethod
    def run_example(slug: str) -> str:
        """
        Import the example module, call its main() and return everything it printed.

        Errors raised by the example propagate unchanged.
        """
        entry = CatalogService.get_example(slug)
        module = importlib.import_module(entry.module)

        buffer = io.StringIO()
        with _run_lock, contextlib.redirect_stdout(buffer):
            module.main()

        output = buffer.getvalue()
        logger.info(f"example_ran slug={slug} chars={len(output)}")
        return output
