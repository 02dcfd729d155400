from ..base_client import BaseAPIClient, Decoded


class Content(BaseAPIClient):
    """
    Provides access to the SedoTMP Content API.

    Inherits URL building, bearer authentication and body decoding from
    `BaseAPIClient`; requests go to `<base_url>/content/<api_version>/`.

    Attributes
    ----------
    token_manager : TokenManager
        Shared session providing credentials, transport and the token.
    """

    segment = "content"

    def get_categories(self) -> Decoded:
        """
        Retrieve the list of content categories.

        Returns
        -------
        list or dict
            Decoded JSON response, typically a list of category records
            such as `{"id": ..., "name": ...}`.

        Raises
        ------
        ApiCallError
            If the HTTP request fails or the API returns an error status.
        """
        return self.make_request(
            "GET",
            self.build_url("categories"),
            operation="fetch categories from"
        )
