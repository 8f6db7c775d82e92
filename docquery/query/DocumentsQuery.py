"""Query parameters specific to the documents feed."""

from docquery.models.EmailPrincipal import EmailPrincipal, new_principal
from docquery.query.QueryBase import QueryBase
from docquery.query.QueryContext import QueryContext, QueryStep, compose_query_uri


class DocumentsQuery:
    """
    Collects the documents feed filters (folder, title, sharing principals, visibility) on top of the
    generic parameters of a QueryBase and renders them into a feed URI.

    Usage::

        query = DocumentsQuery(q="budget", max_results=10)
        query.set_folder_id("folder:123")
        query.set_title("Annual Report", exact_title=True)
        query.add_reader("alice@example.com")
        uri = query.compose_uri("https://docs.google.com/feeds/documents/private/full")
    """

    def __init__(self, q: str | None = None, start_index: int = 0, max_results: int = 0):
        self._base = QueryBase(q=q, start_index=start_index, max_results=max_results)

        # filters
        self._folder_id: str | None = None
        self._title: str | None = None
        self._exact_title = False
        self._show_deleted = False
        self._show_folders = False
        self._collaborator_addresses: list[EmailPrincipal] = []
        self._reader_addresses: list[EmailPrincipal] = []

    ##########################################
    ################ GETTER ##################
    ##########################################

    def get_base(self) -> QueryBase:
        """
        Returns:
            QueryBase: The generic query whose parameters precede the documents filters.
        """
        return self._base

    def get_entry_id(self) -> str | None:
        return self._base.get_entry_id()

    def get_folder_id(self) -> str | None:
        return self._folder_id

    def get_title(self) -> str | None:
        return self._title

    def get_exact_title(self) -> bool:
        return self._exact_title

    def get_show_deleted(self) -> bool:
        return self._show_deleted

    def get_show_folders(self) -> bool:
        return self._show_folders

    def get_collaborator_addresses(self) -> list[EmailPrincipal]:
        """
        Returns:
            list[EmailPrincipal]: A copy of the collaborators, in the order they were added.
        """
        return list(self._collaborator_addresses)

    def get_reader_addresses(self) -> list[EmailPrincipal]:
        """
        Returns:
            list[EmailPrincipal]: A copy of the readers, in the order they were added.
        """
        return list(self._reader_addresses)

    ##########################################
    ################ SETTER ##################
    ##########################################

    def set_entry_id(self, entry_id: str | None) -> None:
        """
        Narrows the query to a single entry. While an entry id is set, none of the documents
        filters are rendered.
        """
        self._base.set_entry_id(entry_id)

    def set_folder_id(self, folder_id: str | None) -> None:
        self._folder_id = folder_id

    def set_title(self, title: str | None, exact_title: bool) -> None:
        """
        Sets the title to match.

        Args:
            title (str | None): The title, or None to stop matching on the title. An empty string is
                still rendered as an (empty) title parameter.
            exact_title (bool): If True, only documents with exactly this title are returned,
                otherwise the title is matched as a substring.
        """
        self._title = title
        self._exact_title = exact_title

    def set_exact_title(self, exact_title: bool) -> None:
        self._exact_title = exact_title

    def set_show_deleted(self, show_deleted: bool) -> None:
        self._show_deleted = show_deleted

    def set_show_folders(self, show_folders: bool) -> None:
        self._show_folders = show_folders

    def add_collaborator(self, address: str) -> None:
        """
        Adds a collaborator, so that documents editable by this address are returned.

        Args:
            address (str): The e-mail address of the collaborator.

        Raises:
            InvalidArgument: If the address is empty.
        """
        self._collaborator_addresses.append(new_principal(address, "collaborator"))

    def add_reader(self, address: str) -> None:
        """
        Adds a reader, so that documents readable by this address are returned.

        Args:
            address (str): The e-mail address of the reader.

        Raises:
            InvalidArgument: If the address is empty.
        """
        self._reader_addresses.append(new_principal(address, "reader"))

    ##########################################
    ############## COMPOSITION ###############
    ##########################################

    def compose_uri(self, feed_uri: str) -> str:
        """
        Renders the query into a request URI for the given feed.

        Args:
            feed_uri (str): The base URI of the documents feed, e.g.
                "https://docs.google.com/feeds/documents/private/full".

        Returns:
            str: The feed URI with the folder path and all parameters applied.
        """
        return compose_query_uri(feed_uri, self._get_query_steps())

    def _get_query_steps(self) -> list[QueryStep]:
        # order is part of the wire format
        return [
            self._append_folder_path,
            self._base.contribute,
            self._append_collaborators,
            self._append_readers,
            self._append_title,
            self._append_visibility,
        ]

    def _append_folder_path(self, context: QueryContext) -> None:
        if self._base.get_entry_id() is None and self._folder_id is not None:
            context.append("/folder%3A")
            context.append_escaped(self._folder_id)

    def _append_collaborators(self, context: QueryContext) -> None:
        self._append_principals(context, "writer", self._collaborator_addresses)

    def _append_readers(self, context: QueryContext) -> None:
        self._append_principals(context, "reader", self._reader_addresses)

    def _append_principals(self, context: QueryContext, name: str, principals: list[EmailPrincipal]) -> None:
        if not principals:
            return
        context.append_separator()
        context.append(f"{name}=")
        for index, principal in enumerate(principals):
            if index:
                context.append(";")
            context.append_escaped(principal.address)

    def _append_title(self, context: QueryContext) -> None:
        if self._title is None:
            return
        context.append_param("title", self._title)
        if self._exact_title:
            context.append("&title-exact=true")

    def _append_visibility(self, context: QueryContext) -> None:
        context.append_separator()
        context.append("showdeleted=true" if self._show_deleted else "showdeleted=false")
        context.append("&showfolders=true" if self._show_folders else "&showfolders=false")
