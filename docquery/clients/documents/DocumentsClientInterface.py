from abc import abstractmethod

import httpx

from docquery.clients.ClientInterface import ClientInterface
from docquery.helper.HelperConfig import HelperConfig
from docquery.query.DocumentsQuery import DocumentsQuery


class DocumentsClientInterface(ClientInterface):
    def __init__(self, helper_config: HelperConfig, transport: httpx.AsyncBaseTransport | None = None):
        super().__init__(helper_config=helper_config, transport=transport)

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_client_type(self) -> str:
        """
        Returns the type of the client. E.g. "documents"
        """
        return "documents"

    def get_feed_uri(self, query: DocumentsQuery) -> str:
        """
        Returns the absolute URI the given query is fetched from.

        Args:
            query (DocumentsQuery): The query to render.

        Returns:
            str: The base URL followed by the composed feed endpoint.
        """
        return f"{self._get_base_url().rstrip('/')}{self._get_endpoint_query(query)}"

    ################ ENDPOINTS ##################
    @abstractmethod
    def _get_endpoint_feed(self) -> str:
        """
        Returns the endpoint path of the documents feed.

        Returns:
            str: The endpoint path of the documents feed (e.g. "/feeds/documents/private/full")
        """
        pass

    def _get_endpoint_query(self, query: DocumentsQuery) -> str:
        return query.compose_uri(self._get_endpoint_feed())

    ##########################################
    ############### REQUESTS #################
    ##########################################

    async def do_fetch_feed(self, query: DocumentsQuery) -> httpx.Response:
        """
        Fetches the documents feed filtered by the given query.

        Args:
            query (DocumentsQuery): The query to apply.

        Returns:
            httpx.Response: The raw feed response. Parsing it is left to the caller.

        Raises:
            RuntimeError: If boot() has not been called.
            httpx.HTTPStatusError: If the backend answers with a non-2xx status.
        """
        endpoint = self._get_endpoint_query(query)
        self.logging.debug("Fetching documents feed %s from %s", endpoint, self._get_engine_name())
        return await self.do_request(method="GET", endpoint=endpoint, raise_on_error=True)
