import httpx

from docquery.clients.documents.DocumentsClientInterface import DocumentsClientInterface
from docquery.helper.HelperConfig import HelperConfig
from docquery.models.config import EnvConfig


class DocumentsClientGData(DocumentsClientInterface):
    def __init__(self, helper_config: HelperConfig, transport: httpx.AsyncBaseTransport | None = None):
        super().__init__(helper_config=helper_config, transport=transport)
        self._base_url = self.get_config_val("BASE_URL", default="https://docs.google.com", val_type="string")
        self._feed_path = self.get_config_val("FEED_PATH", default="/feeds/documents/private/full", val_type="string")
        self._auth_token = self.get_config_val("AUTH_TOKEN", default="", val_type="string")

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_engine_name(self) -> str:
        return "GData"

    ################ CONFIG ##################
    def _get_required_config(self) -> list[EnvConfig]:
        return [
            EnvConfig(env_key="BASE_URL", val_type="string", default="https://docs.google.com"),
            EnvConfig(env_key="FEED_PATH", val_type="string", default="/feeds/documents/private/full"),
            EnvConfig(env_key="AUTH_TOKEN", val_type="string", default=""),
        ]

    ################ AUTH ##################
    def _get_auth_header(self) -> dict:
        if self._auth_token:
            return {"Authorization": f"GoogleLogin auth={self._auth_token}"}
        else:
            return {}

    ################ ENDPOINTS ##################
    def _get_base_url(self) -> str:
        return self._base_url

    def _get_endpoint_healthcheck(self) -> str:
        return self._feed_path

    def _get_endpoint_feed(self) -> str:
        return self._feed_path
