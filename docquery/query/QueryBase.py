"""Generic query parameters shared by every feed."""

from docquery.query.QueryContext import QueryContext, compose_query_uri


class QueryBase:
    """
    Holds the parameters every feed understands: the free-text search term, pagination and the
    id of a single entry to look up.
    """

    def __init__(self, q: str | None = None, start_index: int = 0, max_results: int = 0, entry_id: str | None = None):
        self._q = q
        self._start_index = start_index
        self._max_results = max_results
        self._entry_id = entry_id

    ##########################################
    ################ GETTER ##################
    ##########################################

    def get_q(self) -> str | None:
        return self._q

    def get_start_index(self) -> int:
        """
        Returns:
            int: The one-based index of the first result, 0 if unset.
        """
        return self._start_index

    def get_max_results(self) -> int:
        """
        Returns:
            int: The maximum number of results, 0 if unset.
        """
        return self._max_results

    def get_entry_id(self) -> str | None:
        return self._entry_id

    ##########################################
    ################ SETTER ##################
    ##########################################

    def set_q(self, q: str | None) -> None:
        self._q = q

    def set_start_index(self, start_index: int) -> None:
        self._start_index = start_index

    def set_max_results(self, max_results: int) -> None:
        self._max_results = max_results

    def set_entry_id(self, entry_id: str | None) -> None:
        self._entry_id = entry_id

    ##########################################
    ############## COMPOSITION ###############
    ##########################################

    def contribute(self, context: QueryContext) -> None:
        """
        Appends the generic parameters to the URI.

        If an entry id is set, the URI addresses that single entry: its id is appended as a path
        segment and the context is finished, since single entries take no parameters.

        Args:
            context (QueryContext): The composition context to write into.
        """
        if self._entry_id is not None:
            context.append("/")
            context.append_escaped(self._entry_id, allow_utf8=False)
            context.finish()
            return

        if self._q is not None:
            context.append_param("q", self._q)
        if self._start_index > 0:
            context.append_separator()
            context.append(f"start-index={self._start_index}")
        if self._max_results > 0:
            context.append_separator()
            context.append(f"max-results={self._max_results}")

    def compose_uri(self, feed_uri: str) -> str:
        """
        Returns:
            str: The feed URI with only the generic parameters applied.
        """
        return compose_query_uri(feed_uri, [self.contribute])
