"""Sharing principal model used as a collaborator/reader filter."""

from pydantic import BaseModel, ConfigDict, Field

from docquery.query.exceptions import InvalidArgument


class EmailPrincipal(BaseModel):
    """
    Represents one e-mail identified actor (collaborator or reader) of a document.
    Only the address is rendered into query URIs, the other fields are informational.
    """
    model_config = ConfigDict(frozen=True)

    address: str = Field(min_length=1)
    relation_tag: str
    display_name: str | None = None
    is_primary: bool = False


def new_principal(address: str | None, relation_tag: str, display_name: str | None = None, is_primary: bool = False) -> EmailPrincipal:
    """
    Creates a new EmailPrincipal.

    Args:
        address (str | None): The e-mail address of the principal. Must not be empty.
        relation_tag (str): The relation of the principal to the document, e.g. "reader" or "collaborator".
        display_name (str | None): An optional human readable name.
        is_primary (bool): Whether this is the primary address of the principal.

    Returns:
        EmailPrincipal: The constructed principal.

    Raises:
        InvalidArgument: If the address is empty or None.
    """
    if not address:
        raise InvalidArgument("E-mail address of a principal must not be empty.")
    return EmailPrincipal(address=address, relation_tag=relation_tag, display_name=display_name, is_primary=is_primary)
