from abc import ABC, abstractmethod

import httpx
from typing import Any
from docquery.models.config import EnvConfig

from docquery.helper.HelperConfig import HelperConfig


class ClientInterface(ABC):
    def __init__(self, helper_config: HelperConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.logging = helper_config.get_logger()
        self._helper_config = helper_config
        self.timeout = helper_config.get_number_val(f"{self._get_client_type().upper()}_TIMEOUT", default=30.0)

        # set by boot(), the transport is only replaced in tests
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self.validate_full_configuration()

    ##########################################
    ############### CHECKER ##################
    ##########################################

    def validate_full_configuration(self) -> None:
        """
        Reads every setting the client declares, so a missing or malformed one fails at construction
        instead of on the first request.

        Raises:
            ValueError: If a required setting is missing or malformed.
        """
        for config in self._get_required_config():
            _ = self.get_config_val(raw_key=config.env_key, default=config.default, val_type=config.val_type)

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    @abstractmethod
    def _get_client_type(self) -> str:
        """
        Returns the type of the client, used as the first part of its setting names. E.g. "documents"
        """
        pass

    @abstractmethod
    def _get_engine_name(self) -> str:
        """
        Returns the backend the client talks to, used as the second part of its setting names. E.g. "GData"
        """
        pass

    ################ CONFIG ##################
    @abstractmethod
    def _get_required_config(self) -> list[EnvConfig]:
        """
        Returns:
            list[EnvConfig]: The settings the client reads, without their prefix.
        """
        pass

    def _get_config_key_name(self, raw_key: str) -> str:
        """
        Returns:
            str: The environment variable holding a setting. E.g. "DOCUMENTS_GDATA_FEED_PATH"
        """
        return f"{self._get_client_type()}_{self._get_engine_name()}_{raw_key}".upper()

    def get_config_val(self, raw_key: str, default: Any = None, val_type: str = "string") -> Any:
        """
        Reads one of the client's settings.

        Args:
            raw_key (str): The setting name without the client prefix, e.g. "BASE_URL".
            default (Any): The value used if the setting is not set. None makes the setting required.
            val_type (str): "string", "number" or "bool".

        Raises:
            ValueError: If the value type is unsupported or the setting is missing/malformed.
        """
        key = self._get_config_key_name(raw_key)
        if val_type == "string":
            return self._helper_config.get_string_val(key, default=default)
        elif val_type == "number":
            return self._helper_config.get_number_val(key, default=default)
        elif val_type == "bool":
            return self._helper_config.get_bool_val(key, default=default)
        else:
            raise ValueError(f"Unsupported config value type '{val_type}' for setting '{key}'.")

    ################ AUTH ##################
    @abstractmethod
    def _get_auth_header(self) -> dict:
        """
        Returns:
            dict: The authorization header for the backend, empty if no token is configured.
        """
        pass

    ################ ENDPOINTS ##################
    @abstractmethod
    def _get_base_url(self) -> str:
        """
        Returns:
            str: Scheme and host of the backend (e.g. "https://docs.google.com"), without a path.
        """
        pass

    @abstractmethod
    def _get_endpoint_healthcheck(self) -> str:
        """
        Returns:
            str: A path that answers 2xx while the backend is reachable and the token is accepted.
        """
        pass

    ##########################################
    ############### REQUESTS #################
    ##########################################

    async def do_healthcheck(self) -> httpx.Response:
        """
        Raises:
            httpx.HTTPStatusError: If the healthcheck endpoint does not answer 2xx.
        """
        return await self.do_request(endpoint=self._get_endpoint_healthcheck(), raise_on_error=True)

    ##########################################
    ############ CORE REQUESTS ###############
    ##########################################

    async def boot(self) -> None:
        self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def do_request(
        self,
        method: str = "GET",
        endpoint: str = "",
        additional_headers: dict | None = None,
        raise_on_error: bool = False,
    ) -> httpx.Response:
        """Send a request to the backend.

        Args:
            method: HTTP method.
            endpoint: Path, including an already composed query string, appended to the base URL.
            additional_headers: Extra headers that override the auth header.
            raise_on_error: Raise if the response is not 2xx.

        Returns:
            The raw httpx.Response.

        Raises:
            RuntimeError: If boot() has not been called.
            httpx.HTTPStatusError: If raise_on_error is True and the response is not 2xx.
        """
        if self._client is None:
            raise RuntimeError("HTTP client not initialised. Call boot() before making requests.")

        endpoint = "/" + endpoint.strip().lstrip("/") if endpoint.strip() else ""
        headers = {**self._get_auth_header(), **(additional_headers or {})}
        url = f"{self._get_base_url().rstrip('/')}{endpoint}"

        response = await self._client.request(method, url, headers=headers)

        if raise_on_error and not response.is_success:
            self.logging.error(
                "Request to %s failed with status %d: %s",
                url,
                response.status_code,
                response.text,
            )
            response.raise_for_status()

        return response
