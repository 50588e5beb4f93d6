"""Process entry point: ``python -m pdf_ingest`` or ``ingest-data``."""

from __future__ import annotations

import logging

from pdf_ingest.config import settings
from pdf_ingest.pipeline import run

logger = logging.getLogger("pdf_ingest")


def main() -> int:
    """Run one ingestion pass.

    :class:`~pdf_ingest.errors.IngestionFailedError` is not caught here;
    it propagates so the interpreter exits non-zero.
    """
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    report = run(settings)
    logger.info(
        "documents=%d chunks=%d vectors=%d", report.documents, report.chunks, report.vectors
    )
    print("ingestion complete")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
