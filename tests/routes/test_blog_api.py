# tests/routes/test_blog_api.py
"""Endpoint tests for /api/blogs."""

from uuid import UUID, uuid4

from fastapi import status
from httpx import AsyncClient

from bloglist.db import Database
from bloglist.models import BlogDB, UserDB
from bloglist.repositories import BlogRepository, UserRepository

NEW_BLOG = {
    "title": "Detecting a mistake",
    "author": "Jucca Palmu",
    "url": "www.nono.fi",
    "likes": 3,
}


async def blogs_in_db(database: Database) -> list[BlogDB]:
    async with database.transaction() as session:
        return await BlogRepository(session).get_all()


async def owned_blog_ids(database: Database, user_id: UUID) -> list[str]:
    async with database.transaction() as session:
        user = await UserRepository(session).get_by_id(user_id)
        assert user is not None
        return list(user.blogs)


class TestListBlogs:
    async def test_blogs_are_returned_as_json(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.get("/api/blogs")

        assert response.status_code == status.HTTP_200_OK
        assert "application/json" in response.headers["content-type"]

    async def test_there_are_correct_amount_of_blogs(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.get("/api/blogs")

        assert len(response.json()) == len(initial_blogs)

    async def test_identifying_field_is_called_id(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.get("/api/blogs")

        blog = response.json()[0]
        assert blog["id"] == str(initial_blogs[0].id)
        assert "_id" not in blog

    async def test_owner_is_embedded_without_credentials(
        self,
        client: AsyncClient,
        root_user: UserDB,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.get("/api/blogs")

        owner = response.json()[0]["user"]
        assert owner == {"id": str(root_user.id), "username": "root", "name": "Superuser"}

    async def test_blogs_keep_storage_order(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.get("/api/blogs")

        assert [blog["title"] for blog in response.json()] == [b.title for b in initial_blogs]


class TestCreateBlog:
    async def test_a_blog_can_be_added(
        self,
        client: AsyncClient,
        database: Database,
        root_user: UserDB,
        initial_blogs: list[BlogDB],
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)

        assert response.status_code == status.HTTP_201_CREATED
        assert "application/json" in response.headers["content-type"]
        body = response.json()
        assert body["likes"] == 3
        assert body["user"] == str(root_user.id)

        blogs_at_end = await blogs_in_db(database)
        assert len(blogs_at_end) == len(initial_blogs) + 1
        assert "Detecting a mistake" in [blog.title for blog in blogs_at_end]

    async def test_created_blog_is_appended_to_owner(
        self,
        client: AsyncClient,
        database: Database,
        root_user: UserDB,
        initial_blogs: list[BlogDB],
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG, headers=auth_headers)

        owned = await owned_blog_ids(database, root_user.id)
        assert owned == [*(str(blog.id) for blog in initial_blogs), response.json()["id"]]

    async def test_missing_likes_default_to_zero(
        self,
        client: AsyncClient,
        database: Database,
        auth_headers: dict[str, str],
    ) -> None:
        payload = {key: value for key, value in NEW_BLOG.items() if key != "likes"}

        response = await client.post("/api/blogs", json=payload, headers=auth_headers)

        assert response.status_code == status.HTTP_201_CREATED
        blog = next(b for b in await blogs_in_db(database) if b.title == "Detecting a mistake")
        assert blog.likes == 0

    async def test_invalid_blog_will_not_be_added(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json={"author": "Jucca Palmu", "likes": 3},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["kind"] == "ValidationFailed"

        listed = await client.get("/api/blogs")
        assert len(listed.json()) == len(initial_blogs)

    async def test_empty_title_is_rejected(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json={**NEW_BLOG, "title": "   "},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "title" in response.json()["detail"]

    async def test_negative_likes_are_rejected(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json={**NEW_BLOG, "likes": -1},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_likes_beyond_column_range_are_rejected(
        self,
        client: AsyncClient,
        database: Database,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json={**NEW_BLOG, "likes": 10**20},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["kind"] == "ValidationFailed"
        assert body["errors"][0]["field"] == "likes"
        assert await blogs_in_db(database) == []

    async def test_missing_token_is_unauthorized(
        self,
        client: AsyncClient,
        database: Database,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"kind": "Unauthorized", "detail": "token missing or invalid"}
        assert response.headers["www-authenticate"] == "Bearer"
        assert len(await blogs_in_db(database)) == len(initial_blogs)

    async def test_garbage_token_is_unauthorized(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG,
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_missing_token_wins_over_invalid_body(self, client: AsyncClient) -> None:
        response = await client.post("/api/blogs", json={"author": "Jucca Palmu"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestDeleteBlog:
    async def test_a_blog_can_be_deleted(
        self,
        client: AsyncClient,
        database: Database,
        initial_blogs: list[BlogDB],
        auth_headers: dict[str, str],
    ) -> None:
        blog_to_delete = initial_blogs[0]

        response = await client.delete(f"/api/blogs/{blog_to_delete.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""
        blogs_at_end = await blogs_in_db(database)
        assert len(blogs_at_end) == len(initial_blogs) - 1
        assert blog_to_delete.title not in [blog.title for blog in blogs_at_end]

    async def test_deleted_blog_is_pruned_from_owner(
        self,
        client: AsyncClient,
        database: Database,
        root_user: UserDB,
        initial_blogs: list[BlogDB],
        auth_headers: dict[str, str],
    ) -> None:
        await client.delete(f"/api/blogs/{initial_blogs[0].id}", headers=auth_headers)

        assert await owned_blog_ids(database, root_user.id) == [str(initial_blogs[1].id)]

    async def test_non_owner_is_forbidden(
        self,
        client: AsyncClient,
        database: Database,
        initial_blogs: list[BlogDB],
        other_auth_headers: dict[str, str],
    ) -> None:
        response = await client.delete(
            f"/api/blogs/{initial_blogs[0].id}",
            headers=other_auth_headers,
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == "You cannot delete a blog that is not yours"
        assert len(await blogs_in_db(database)) == len(initial_blogs)

    async def test_absent_blog_is_not_found(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.delete(f"/api/blogs/{uuid4()}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"kind": "NotFound", "detail": "blog has already been deleted"}

    async def test_missing_token_is_unauthorized(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.delete(f"/api/blogs/{initial_blogs[0].id}")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_malformed_id_is_a_validation_failure(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.delete("/api/blogs/not-a-uuid", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["kind"] == "ValidationFailed"
        assert body["errors"][0]["field"] == "blog_id"


class TestUpdateBlog:
    async def test_likes_can_be_updated(
        self,
        client: AsyncClient,
        database: Database,
        initial_blogs: list[BlogDB],
        auth_headers: dict[str, str],
    ) -> None:
        blog = initial_blogs[0]
        payload = {
            "title": blog.title,
            "author": blog.author,
            "url": blog.url,
            "likes": blog.likes + 1,
        }

        response = await client.put(f"/api/blogs/{blog.id}", json=payload, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert "application/json" in response.headers["content-type"]
        updated = next(b for b in await blogs_in_db(database) if b.id == blog.id)
        assert updated.likes == blog.likes + 1

    async def test_partial_update_keeps_other_fields(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
        auth_headers: dict[str, str],
    ) -> None:
        blog = initial_blogs[1]

        response = await client.put(
            f"/api/blogs/{blog.id}",
            json={"likes": 42},
            headers=auth_headers,
        )

        body = response.json()
        assert body["likes"] == 42
        assert body["title"] == blog.title
        assert body["url"] == blog.url

    async def test_likes_beyond_column_range_are_rejected(
        self,
        client: AsyncClient,
        database: Database,
        initial_blogs: list[BlogDB],
        auth_headers: dict[str, str],
    ) -> None:
        blog = initial_blogs[0]

        response = await client.put(
            f"/api/blogs/{blog.id}",
            json={"likes": 2**31},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["kind"] == "ValidationFailed"
        unchanged = next(b for b in await blogs_in_db(database) if b.id == blog.id)
        assert unchanged.likes == blog.likes

    async def test_non_owner_is_forbidden(
        self,
        client: AsyncClient,
        database: Database,
        initial_blogs: list[BlogDB],
        other_auth_headers: dict[str, str],
    ) -> None:
        blog = initial_blogs[0]

        response = await client.put(
            f"/api/blogs/{blog.id}",
            json={"likes": 100},
            headers=other_auth_headers,
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        unchanged = next(b for b in await blogs_in_db(database) if b.id == blog.id)
        assert unchanged.likes == blog.likes

    async def test_absent_blog_is_not_found(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.put(f"/api/blogs/{uuid4()}", json={"likes": 1}, headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_empty_url_is_rejected(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.put(
            f"/api/blogs/{initial_blogs[0].id}",
            json={"url": ""},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_missing_token_is_unauthorized(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.put(f"/api/blogs/{initial_blogs[0].id}", json={"likes": 1})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestBlogStatistics:
    async def test_empty_collection_reports_no_blogs(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs/stats")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"maxLikes": 0, "mostLiked": "no blogs"}

    async def test_most_liked_blog_is_reported(
        self,
        client: AsyncClient,
        initial_blogs: list[BlogDB],
    ) -> None:
        response = await client.get("/api/blogs/stats")

        body = response.json()
        assert body["maxLikes"] == 7
        assert body["mostLiked"]["id"] == str(initial_blogs[0].id)
        assert body["mostLiked"]["title"] == "React patterns"
