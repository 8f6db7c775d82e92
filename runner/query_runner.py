"""Query runner entry point.

Builds a documents query from QUERY_* environment variables, logs the composed
feed URI and, if QUERY_FETCH is true, fetches it from the documents backend.

Usage:
    QUERY_TITLE="Annual Report" QUERY_READERS="[a@x.com,b@y.com]" python -m runner.query_runner
"""

import asyncio

from docquery.clients.documents.gdata.DocumentsClientGData import DocumentsClientGData
from docquery.helper.HelperConfig import HelperConfig
from docquery.logging.logging_setup import setup_logging
from docquery.query.DocumentsQuery import DocumentsQuery


def build_query(config: HelperConfig) -> DocumentsQuery:
    """
    Builds a DocumentsQuery from the QUERY_* environment variables.

    Args:
        config (HelperConfig): The configuration helper to read from.

    Returns:
        DocumentsQuery: The configured query.

    Raises:
        ValueError: If a numeric or list variable is malformed.
        InvalidArgument: If a principal address is empty.
    """
    query = DocumentsQuery(
        q=config.get_optional_string_val("QUERY_TEXT"),
        start_index=int(config.get_number_val("QUERY_START_INDEX", default=0)),
        max_results=int(config.get_number_val("QUERY_MAX_RESULTS", default=0)),
    )
    query.set_entry_id(config.get_optional_string_val("QUERY_ENTRY_ID"))
    query.set_folder_id(config.get_optional_string_val("QUERY_FOLDER_ID"))
    query.set_title(
        config.get_optional_string_val("QUERY_TITLE"),
        exact_title=config.get_bool_val("QUERY_EXACT_TITLE", default=False),
    )
    query.set_show_deleted(config.get_bool_val("QUERY_SHOW_DELETED", default=False))
    query.set_show_folders(config.get_bool_val("QUERY_SHOW_FOLDERS", default=False))
    for address in config.get_list_val("QUERY_COLLABORATORS", default=[]):
        query.add_collaborator(address)
    for address in config.get_list_val("QUERY_READERS", default=[]):
        query.add_reader(address)
    return query


async def main() -> int:
    """Compose the configured query and optionally fetch it."""
    logger = setup_logging()
    config = HelperConfig(logger=logger)

    documents_client = DocumentsClientGData(helper_config=config)
    query = build_query(config)
    logger.info("Composed feed URI: %s", documents_client.get_feed_uri(query), color="cyan")

    if not config.get_bool_val("QUERY_FETCH", default=False):
        return 0

    try:
        await documents_client.boot()
        response = await documents_client.do_fetch_feed(query)
        logger.info("Fetched documents feed (%d bytes, status %d).", len(response.content), response.status_code, color="green")
    finally:
        await documents_client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
