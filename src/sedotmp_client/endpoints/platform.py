from ..base_client import BaseAPIClient, Decoded, build_page_query, build_query
from typing import Any, Dict, List, Optional

POSTBACK_TEMPLATES = "tracking-data-templates/postback"
TRAFFIC_SOURCE_TEMPLATES = "tracking-data-templates/traffic-source"


class Platform(BaseAPIClient):
    """
    Provides access to the SedoTMP Platform API.

    Covers content campaigns, the campaign and keyword performance reports,
    and the postback / traffic-source tracking-data templates. Requests go
    to `<base_url>/platform/<api_version>/`.

    Attributes
    ----------
    token_manager : TokenManager
        Shared session providing credentials, transport and the token.

    Notes
    -----
    - Report endpoints answer NDJSON; their result is always a list of
      records, one per line.
    - Delete methods return None; success means no exception was raised.
    """

    segment = "platform"

    # ------------------------------------------------------------------
    # Content campaigns
    # ------------------------------------------------------------------
    def get_content_campaigns(
        self,
        page: int = 0
    ) -> Decoded:
        """
        Retrieve one page of content campaigns.

        Parameters
        ----------
        page : int, default=0
            Zero-based page number.

        Returns
        -------
        dict
            Decoded JSON response (e.g. `{"campaigns": [...]}`).
        """
        url = self.build_url("content-campaigns", query=f"page={int(page)}")
        return self.make_request(
            "GET",
            url,
            operation="fetch content campaigns from"
        )

    def get_content_campaign(
        self,
        campaign_id: str
    ) -> Decoded:
        """Retrieve a single content campaign by id."""
        return self.make_request(
            "GET",
            self.build_url("content-campaigns", campaign_id),
            operation="fetch content campaign from"
        )

    def create_content_campaign(
        self,
        data: Dict[str, Any]
    ) -> Decoded:
        """Create a content campaign; `data` is sent verbatim as JSON."""
        return self.make_request(
            "POST",
            self.build_url("content-campaigns"),
            operation="create content campaign in",
            body=data
        )

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------
    def get_campaign_report(
        self,
        *,
        dimensions: Optional[List[str]] = None,
        filter: Optional[Dict[str, Any]] = None,
        sort: Optional[str] = None,
        pagination: Optional[Dict[str, Any]] = None,
    ) -> Decoded:
        """
        Retrieve the campaign report.

        Parameters
        ----------
        dimensions : list of str, optional
            Grouping dimensions (e.g. `["DATE", "COUNTRY"]`).
        filter : dict, optional
            Report filter, sent JSON-encoded
            (e.g. `{"startDate": {"year": 2024, "month": 1, "day": 1}}`).
        sort : str, optional
            Sort expression, e.g. `"CLICKS,asc"`.
        pagination : dict, optional
            `{"offset": 0, "limit": 100}` or `{"page": 0, "size": 10}`.
            Offset/limit takes precedence when both are given.

        Returns
        -------
        list of dict
            One record per NDJSON line, in response order.

        Raises
        ------
        ApiCallError
            If the HTTP request fails or the API returns an error status.
        """
        query = build_query(
            dimensions=dimensions,
            filter=filter,
            sort=sort,
            pagination=pagination
        )
        return self.make_request(
            "GET",
            self.build_url("campaign-report", query=query),
            operation="fetch campaign report from"
        )

    def get_keyword_performance_report(
        self,
        *,
        dimensions: Optional[List[str]] = None,
        filter: Optional[Dict[str, Any]] = None,
        sort: Optional[str] = None,
        pagination: Optional[Dict[str, Any]] = None,
    ) -> Decoded:
        """
        Retrieve the keyword performance report.

        Accepts the same parameters as `get_campaign_report`.

        Returns
        -------
        list of dict
            One record per NDJSON line (e.g. keywords, clicks,
            estimatedRevenue), in response order.
        """
        query = build_query(
            dimensions=dimensions,
            filter=filter,
            sort=sort,
            pagination=pagination
        )
        return self.make_request(
            "GET",
            self.build_url("keyword-performance-report", query=query),
            operation="fetch keyword performance report from"
        )

    # ------------------------------------------------------------------
    # Postback templates
    # ------------------------------------------------------------------
    def get_postback_templates(
        self,
        *,
        filter: Optional[Dict[str, Any]] = None,
        page: Optional[Dict[str, Any]] = None,
    ) -> Decoded:
        """
        List postback templates.

        Parameters
        ----------
        filter : dict, optional
            Sent JSON-encoded, e.g. `{"name": "Template-123"}`.
        page : dict, optional
            Any of `page`, `size` and `sort` (e.g. `"name,asc"`).
        """
        query = build_page_query(filter=filter, page=page)
        return self.make_request(
            "GET",
            self.build_url(POSTBACK_TEMPLATES, query=query),
            operation="fetch postback templates from"
        )

    def get_postback_template(
        self,
        template_id: str
    ) -> Decoded:
        return self.make_request(
            "GET",
            self.build_url(POSTBACK_TEMPLATES, template_id),
            operation="fetch postback template from"
        )

    def create_postback_template(
        self,
        data: Dict[str, Any]
    ) -> Decoded:
        return self.make_request(
            "POST",
            self.build_url(POSTBACK_TEMPLATES),
            operation="create postback template in",
            body=data
        )

    def update_postback_template(
        self,
        template_id: str,
        data: Dict[str, Any]
    ) -> Decoded:
        return self.make_request(
            "PUT",
            self.build_url(POSTBACK_TEMPLATES, template_id),
            operation="update postback template in",
            body=data
        )

    def delete_postback_template(
        self,
        template_id: str
    ) -> None:
        """Delete a postback template. The response body is not read."""
        self.make_request(
            "DELETE",
            self.build_url(POSTBACK_TEMPLATES, template_id),
            operation="delete postback template from",
            decode=False
        )

    # ------------------------------------------------------------------
    # Traffic source templates
    # ------------------------------------------------------------------
    def get_traffic_source_templates(
        self,
        *,
        filter: Optional[Dict[str, Any]] = None,
        page: Optional[Dict[str, Any]] = None,
    ) -> Decoded:
        """List traffic source templates; see `get_postback_templates`."""
        query = build_page_query(filter=filter, page=page)
        return self.make_request(
            "GET",
            self.build_url(TRAFFIC_SOURCE_TEMPLATES, query=query),
            operation="fetch traffic source templates from"
        )

    def get_traffic_source_template(
        self,
        template_id: str
    ) -> Decoded:
        return self.make_request(
            "GET",
            self.build_url(TRAFFIC_SOURCE_TEMPLATES, template_id),
            operation="fetch traffic source template from"
        )

    def create_traffic_source_template(
        self,
        data: Dict[str, Any]
    ) -> Decoded:
        return self.make_request(
            "POST",
            self.build_url(TRAFFIC_SOURCE_TEMPLATES),
            operation="create traffic source template in",
            body=data
        )

    def update_traffic_source_template(
        self,
        template_id: str,
        data: Dict[str, Any]
    ) -> Decoded:
        return self.make_request(
            "PUT",
            self.build_url(TRAFFIC_SOURCE_TEMPLATES, template_id),
            operation="update traffic source template in",
            body=data
        )

    def delete_traffic_source_template(
        self,
        template_id: str
    ) -> None:
        self.make_request(
            "DELETE",
            self.build_url(TRAFFIC_SOURCE_TEMPLATES, template_id),
            operation="delete traffic source template from",
            decode=False
        )
