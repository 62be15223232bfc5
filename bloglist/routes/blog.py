"""
Blog Routes.

Provides listing, statistics and ownership-checked create/update/delete
endpoints for blogs.

Summary
-------
Endpoints include:
  - List blogs
  - Like statistics
  - Create blog
  - Update blog
  - Delete blog

Dependencies
------------
  - `BlogServiceDep`: Blog service bound to the request's session.
  - `PrincipalDep`: Identity resolved from the bearer token.

Rate Limiting
-------------
Write endpoints define explicit limits and include `429` response examples.
Tiered limits apply when `X-API-Key` is present.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogServiceDep, PrincipalDep
from bloglist.managers import limiter
from bloglist.schemas import BlogListResponse, BlogResponse, BlogStatisticsResponse

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

_BLOG_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "title": "Detecting a mistake",
    "author": "Jucca Palmu",
    "url": "www.nono.fi",
    "likes": 3,
    "user": "123e4567-e89b-12d3-a456-426614174111",
}
_UNAUTHORIZED = {
    "description": "Unauthorized",
    "content": {
        "application/json": {
            "example": {"kind": "Unauthorized", "detail": "token missing or invalid"},
        },
    },
}
_RATE_LIMITED = {
    "description": "Rate limit exceeded",
    "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
}

BlogPayload = Annotated[
    dict[str, Any],
    Body(
        examples=[
            {
                "title": "Detecting a mistake",
                "author": "Jucca Palmu",
                "url": "www.nono.fi",
                "likes": 3,
            },
        ],
    ),
]


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogListResponse],
    summary="List blogs",
    description="Return every blog with its owner's id, username and name.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        {
                            **_BLOG_EXAMPLE,
                            "user": {
                                "id": "123e4567-e89b-12d3-a456-426614174111",
                                "username": "mluukkai",
                                "name": "Matti Luukkainen",
                            },
                        },
                    ],
                },
            },
        },
    },
    operation_id="blogs_list",
)
async def list_blogs(service: BlogServiceDep) -> list[BlogListResponse]:
    """
    List every blog.

    Parameters
    ----------
    service : BlogService
        Blog service dependency.

    Returns
    -------
    list[BlogListResponse]
        Blogs in storage order with embedded owner.
    """
    return await service.list_blogs()


@router.get(
    "/stats",
    response_class=ORJSONResponse,
    response_model=BlogStatisticsResponse,
    response_model_by_alias=True,
    summary="Like statistics",
    description='Return the highest like count and the first blog reaching it, or "no blogs".',
    responses={
        200: {
            "content": {
                "application/json": {"example": {"maxLikes": 3, "mostLiked": _BLOG_EXAMPLE}},
            },
        },
    },
    operation_id="blogs_stats",
)
async def blog_statistics(service: BlogServiceDep) -> BlogStatisticsResponse:
    return await service.statistics()


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create blog",
    description="Create a blog owned by the authenticated user.",
    responses={
        201: {"content": {"application/json": {"example": _BLOG_EXAMPLE}}},
        400: {
            "description": "Validation failed",
            "content": {
                "application/json": {
                    "example": {
                        "kind": "ValidationFailed",
                        "detail": "Blog validation failed: title: title is required",
                    },
                },
            },
        },
        401: _UNAUTHORIZED,
        429: _RATE_LIMITED,
    },
    operation_id="blogs_create",
)
@limiter.limit(lambda key: "30/minute" if "apikey" in key else "10/minute")
async def create_blog(
    request: Request,
    response: Response,
    payload: BlogPayload,
    principal: PrincipalDep,
    service: BlogServiceDep,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for the rate limiter headers.
    payload : dict
        Blog fields: title, author, url, likes.
    principal : Principal
        Authenticated identity.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Created blog data.
    """
    return await service.create_blog(principal, payload)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update blog",
    description="Replace the provided fields of a blog the authenticated user owns.",
    responses={
        200: {"content": {"application/json": {"example": {**_BLOG_EXAMPLE, "likes": 4}}}},
        401: _UNAUTHORIZED,
        403: {
            "description": "Forbidden",
            "content": {
                "application/json": {
                    "example": {
                        "kind": "Forbidden",
                        "detail": "You cannot modify a blog that is not yours",
                    },
                },
            },
        },
        404: {
            "description": "Not found",
            "content": {"application/json": {"example": {"kind": "NotFound", "detail": "blog not found"}}},
        },
        429: _RATE_LIMITED,
    },
    operation_id="blogs_update",
)
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def update_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    payload: BlogPayload,
    principal: PrincipalDep,
    service: BlogServiceDep,
) -> BlogResponse:
    """
    Update a blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for the rate limiter headers.
    blog_id : UUID
        Blog identifier.
    payload : dict
        Fields to replace.
    principal : Principal
        Authenticated identity.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Updated blog data.
    """
    return await service.update_blog(principal, blog_id, payload)


@router.delete(
    "/{blog_id}",
    response_class=Response,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog the authenticated user owns.",
    responses={
        204: {"description": "Blog deleted"},
        401: _UNAUTHORIZED,
        403: {
            "description": "Forbidden",
            "content": {
                "application/json": {
                    "example": {
                        "kind": "Forbidden",
                        "detail": "You cannot delete a blog that is not yours",
                    },
                },
            },
        },
        404: {
            "description": "Not found",
            "content": {
                "application/json": {
                    "example": {"kind": "NotFound", "detail": "blog has already been deleted"},
                },
            },
        },
        429: _RATE_LIMITED,
    },
    operation_id="blogs_delete",
)
@limiter.limit(lambda key: "30/minute" if "apikey" in key else "10/minute")
async def delete_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    principal: PrincipalDep,
    service: BlogServiceDep,
) -> Response:
    """
    Delete a blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for the rate limiter headers.
    blog_id : UUID
        Blog identifier.
    principal : Principal
        Authenticated identity.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    Response
        Empty 204 response.
    """
    await service.delete_blog(principal, blog_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
