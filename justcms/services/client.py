"""Async client for the JustCMS public REST API."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from justcms.config import JustCmsConfig
from justcms.errors import JustCmsApiError, JustCmsConfigError
from justcms.models.category import CategoriesResponse, Category
from justcms.models.image import Image, ImageVariant
from justcms.models.menu import Menu
from justcms.models.page import PageDetail, PageFilters, PagesResponse, PageSummary
from justcms.services import helpers

logger = logging.getLogger(__name__)

BASE_URL = "https://api.justcms.co/public"

ModelT = TypeVar("ModelT", bound=BaseModel)


class JustCmsClient:
    """Typed read-only access to one JustCMS project.

    Every network method issues exactly one GET request.  Nothing is cached
    or retried; a failed request raises :class:`JustCmsApiError`.

    Pass *http_client* to reuse an application-owned ``httpx.AsyncClient``
    (it is never closed here).  Without one, each call opens its own.
    """

    def __init__(
        self,
        config: JustCmsConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if not config.api_token:
            raise JustCmsConfigError("JustCMS API token is required")
        if not config.project_id:
            raise JustCmsConfigError("JustCMS project ID is required")
        self._config = config
        self._http_client = http_client

    # ------------------------------------------------------------------
    # Content endpoints
    # ------------------------------------------------------------------

    async def get_categories(self) -> List[Category]:
        """Return all categories of the project, in API order."""
        response = await self._get(CategoriesResponse)
        return response.categories

    async def get_pages(
        self,
        filters: Union[PageFilters, Mapping[str, Any], None] = None,
        start: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> PagesResponse:
        """Return one page of page summaries.

        Args:
            filters: Restrict to pages of a category, e.g.
                ``{"category": {"slug": "blog"}}``.
            start: Pagination start index.
            offset: Number of items to return.
        """
        query: Dict[str, Any] = {"start": start, "offset": offset}
        if filters is not None:
            if not isinstance(filters, PageFilters):
                filters = PageFilters.model_validate(filters)
            if filters.category.slug:
                query["filter.category.slug"] = filters.category.slug
        return await self._get(PagesResponse, "pages", query)

    async def get_page_by_slug(self, slug: str, version: Optional[str] = None) -> PageDetail:
        """Return the full page *slug*; *version* (e.g. ``"draft"``) selects a revision."""
        query = {"v": version} if version else None
        return await self._get(PageDetail, f"pages/{slug}", query)

    async def get_menu_by_id(self, id: str) -> Menu:
        return await self._get(Menu, f"menus/{id}")

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------

    @staticmethod
    def is_block_has_style(block, style: str) -> bool:
        return helpers.is_block_has_style(block, style)

    @staticmethod
    def get_large_image_variant(image: Image) -> Optional[ImageVariant]:
        return helpers.get_large_image_variant(image)

    @staticmethod
    def get_first_image(block) -> Optional[Image]:
        return helpers.get_first_image(block)

    @staticmethod
    def has_category(page: PageSummary, category_slug: str) -> bool:
        return helpers.has_category(page, category_slug)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _build_url(self, endpoint: str = "") -> str:
        url = f"{BASE_URL}/{self._config.project_id}"
        return f"{url}/{endpoint}" if endpoint else url

    @staticmethod
    def _build_params(query: Optional[Mapping[str, Any]]) -> Dict[str, str]:
        """Drop ``None`` values and stringify the rest."""
        if not query:
            return {}
        return {key: str(value) for key, value in query.items() if value is not None}

    async def _get(
        self,
        model: Type[ModelT],
        endpoint: str = "",
        query: Optional[Mapping[str, Any]] = None,
    ) -> ModelT:
        url = self._build_url(endpoint)
        params = self._build_params(query)
        headers = {"Authorization": f"Bearer {self._config.api_token}"}
        logger.debug("GET %s params=%s", url, params)

        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, params=params, headers=headers)
                response.raise_for_status()
            else:
                async with httpx.AsyncClient(follow_redirects=True) as client:
                    response = await client.get(url, params=params, headers=headers)
                    response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("JustCMS request to %s failed with HTTP %d", url, status)
            raise JustCmsApiError(status, str(exc)) from exc
        except httpx.RequestError as exc:
            logger.warning("JustCMS request to %s failed: %s", url, exc)
            raise JustCmsApiError(0, str(exc)) from exc
        except ValueError as exc:
            logger.warning("JustCMS response from %s is not valid JSON: %s", url, exc)
            raise JustCmsApiError(response.status_code, str(exc)) from exc

        if not isinstance(body, dict):
            logger.warning("JustCMS response from %s is not a JSON object", url)
            body = {}
        return model.model_validate(body)
