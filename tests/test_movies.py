import base64

import pytest

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def _b64(content: bytes) -> str:
    return base64.b64encode(content).decode("ascii")

def _form(genre_id, **overrides):
    form = {
        "Title": "Inception",
        "Year": "2010",
        "Storeline": "Dreams within dreams.",
        "Rate": "8.8",
        "GenreId": str(genre_id),
    }
    form.update(overrides)
    return form

def _poster(filename="poster.png", content=PNG_BYTES):
    return {"Poster": (filename, content, "image/png")}


# ==========================================
# 조회
# ==========================================

def test_list_movies_empty(client):
    response = client.get("/api/movies")
    assert response.status_code == 200
    assert response.json()["data"]["items"] == []

def test_list_movies_sorted_by_rate_desc(client, make_genre, make_movie):
    genre = make_genre("Drama")
    make_movie(genre, title="Low", rate=5.0)
    make_movie(genre, title="High", rate=9.1)
    make_movie(genre, title="Mid", rate=7.3)

    response = client.get("/api/movies")
    rates = [m["rate"] for m in response.json()["data"]["items"]]
    assert rates == [9.1, 7.3, 5.0]

def test_get_movie_details_includes_genre_name(client, make_genre, make_movie):
    genre = make_genre("Crime")
    movie = make_movie(genre, title="Heat")

    response = client.get(f"/api/movies/{movie.id}")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["title"] == "Heat"
    assert data["genre_id"] == genre.id
    assert data["genre_name"] == "Crime"
    assert data["poster"] == _b64(PNG_BYTES)

def test_get_movie_details_tracks_genre_rename(client, make_genre, make_movie):
    genre = make_genre("Scifi")
    movie = make_movie(genre)
    client.put(f"/api/genres/{genre.id}", json={"Name": "Science Fiction"})

    response = client.get(f"/api/movies/{movie.id}")
    assert response.json()["data"]["genre_name"] == "Science Fiction"

def test_get_movie_404(client):
    response = client.get("/api/movies/12345")
    assert response.status_code == 404
    assert response.json()["code"] == "RESOURCE_NOT_FOUND"

def test_get_by_genre_id(client, make_genre, make_movie):
    action = make_genre("Action")
    comedy = make_genre("Comedy")
    make_movie(action, title="Die Hard", rate=8.2)
    make_movie(comedy, title="Airplane!", rate=7.7)
    make_movie(action, title="Speed", rate=7.2)

    response = client.get("/api/movies/GetByGenreId", params={"genreId": action.id})
    assert response.status_code == 200
    items = response.json()["data"]["items"]
    assert [m["title"] for m in items] == ["Die Hard", "Speed"]
    assert all(m["genre_name"] == "Action" for m in items)

def test_get_by_genre_id_requires_param(client):
    response = client.get("/api/movies/GetByGenreId")
    assert response.status_code == 400


# ==========================================
# 생성
# ==========================================

def test_create_movie(client, make_genre):
    genre = make_genre("Action")
    response = client.post("/api/movies", data=_form(genre.id), files=_poster())
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["title"] == "Inception"
    assert data["year"] == 2010
    assert data["rate"] == 8.8
    assert data["genre_id"] == genre.id
    assert "genre_name" not in data
    assert data["poster"] == _b64(PNG_BYTES)

    listed = client.get("/api/movies").json()["data"]["items"]
    assert [m["id"] for m in listed] == [data["id"]]

def test_create_movie_jpg(client, make_genre):
    genre = make_genre("Action")
    response = client.post(
        "/api/movies",
        data=_form(genre.id),
        files={"Poster": ("cover.jpg", b"\xff\xd8\xff\xe0jpeg", "image/jpeg")},
    )
    assert response.status_code == 200

def test_create_movie_without_poster(client, make_genre):
    genre = make_genre("Action")
    response = client.post("/api/movies", data=_form(genre.id))
    assert response.status_code == 400
    assert response.json()["message"] == "Poster is Required"

def test_create_movie_gif_rejected(client, make_genre):
    genre = make_genre("Action")
    response = client.post(
        "/api/movies",
        data=_form(genre.id),
        files={"Poster": ("anim.gif", b"GIF89a", "image/gif")},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Only .Png and .Jpg images are allowed!"

def test_create_movie_uppercase_extension_rejected(client, make_genre):
    genre = make_genre("Action")
    response = client.post("/api/movies", data=_form(genre.id), files=_poster("POSTER.PNG"))
    assert response.status_code == 400

def test_create_movie_oversized_poster(client, make_genre):
    genre = make_genre("Action")
    response = client.post(
        "/api/movies",
        data=_form(genre.id),
        files=_poster(content=b"\x00" * (1048576 + 1)),
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Max allowed size for Poster is 1MB!"

def test_create_movie_poster_at_size_limit(client, make_genre):
    genre = make_genre("Action")
    response = client.post(
        "/api/movies",
        data=_form(genre.id),
        files=_poster(content=b"\x00" * 1048576),
    )
    assert response.status_code == 200

def test_create_movie_invalid_genre(client):
    response = client.post("/api/movies", data=_form(77), files=_poster())
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid genre ID!"

def test_create_movie_missing_field(client, make_genre):
    genre = make_genre("Action")
    form = _form(genre.id)
    del form["Title"]
    response = client.post("/api/movies", data=form, files=_poster())
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_FAILED"


# ==========================================
# 수정
# ==========================================

def test_update_movie_keeps_poster_when_omitted(client, make_genre, make_movie):
    genre = make_genre("Drama")
    movie = make_movie(genre, title="Old", rate=6.0)

    response = client.put(
        f"/api/movies/{movie.id}",
        data=_form(genre.id, Title="New", Rate="9.0"),
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["title"] == "New"
    assert data["rate"] == 9.0
    assert data["poster"] == _b64(PNG_BYTES)

def test_update_movie_replaces_poster(client, make_genre, make_movie):
    genre = make_genre("Drama")
    movie = make_movie(genre)
    new_poster = b"\xff\xd8\xff\xe0new-poster"

    response = client.put(
        f"/api/movies/{movie.id}",
        data=_form(genre.id),
        files={"Poster": ("new.jpg", new_poster, "image/jpeg")},
    )
    assert response.status_code == 200
    assert response.json()["data"]["poster"] == _b64(new_poster)

def test_update_movie_invalid_poster(client, make_genre, make_movie):
    genre = make_genre("Drama")
    movie = make_movie(genre)
    response = client.put(
        f"/api/movies/{movie.id}",
        data=_form(genre.id),
        files={"Poster": ("anim.gif", b"GIF89a", "image/gif")},
    )
    assert response.status_code == 400

def test_update_movie_invalid_genre_is_accepted(client, make_genre, make_movie):
    # 수정 시 장르 검증 결과는 기본적으로 적용되지 않음
    genre = make_genre("Drama")
    movie = make_movie(genre)

    response = client.put(f"/api/movies/{movie.id}", data=_form(201))
    assert response.status_code == 200
    assert response.json()["data"]["genre_id"] == 201

    details = client.get(f"/api/movies/{movie.id}").json()["data"]
    assert details["genre_name"] is None

def test_update_movie_invalid_genre_enforced(client, make_genre, make_movie, monkeypatch):
    from movies_api.core.config import settings

    monkeypatch.setattr(settings, "ENFORCE_GENRE_ON_UPDATE", True)
    genre = make_genre("Drama")
    movie = make_movie(genre)

    response = client.put(f"/api/movies/{movie.id}", data=_form(201))
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid genre ID!"

def test_update_movie_404(client, make_genre):
    genre = make_genre("Drama")
    response = client.put("/api/movies/999", data=_form(genre.id))
    assert response.status_code == 404
    assert response.json()["message"] == "No movie was found with ID: 999"


# ==========================================
# 삭제
# ==========================================

def test_delete_movie(client, make_genre, make_movie):
    genre = make_genre("Horror")
    movie_id = make_movie(genre, title="Alien").id

    response = client.delete(f"/api/movies/{movie_id}")
    assert response.status_code == 200
    assert response.json()["data"]["title"] == "Alien"

    assert client.get(f"/api/movies/{movie_id}").status_code == 404

def test_delete_movie_404(client):
    response = client.delete("/api/movies/31337")
    assert response.status_code == 404


# ==========================================
# 입력 범위 / 직렬화
# ==========================================

def test_poster_uses_standard_base64_alphabet(client, make_genre):
    genre = make_genre("Action")
    # 0xfb 0xff 0xbf -> "+/+/" (URL-safe라면 "-_-_")
    content = b"\x89PNG" + b"\xfb\xff\xbf" * 8
    response = client.post("/api/movies", data=_form(genre.id), files=_poster(content=content))
    assert response.status_code == 200
    poster = response.json()["data"]["poster"]
    assert poster == base64.b64encode(content).decode("ascii")
    assert "+/+/" in poster

    listed = client.get("/api/movies").json()["data"]["items"]
    assert listed[0]["poster"] == poster

@pytest.mark.parametrize("rate", ["nan", "inf", "-inf"])
def test_create_movie_non_finite_rate_rejected(client, make_genre, rate):
    genre = make_genre("Action")
    response = client.post("/api/movies", data=_form(genre.id, Rate=rate), files=_poster())
    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_FAILED"
    assert "body.Rate" in body["details"]

    # 목록 조회가 깨지지 않아야 함
    listed = client.get("/api/movies")
    assert listed.status_code == 200
    assert listed.json()["data"]["items"] == []

@pytest.mark.parametrize("rate", ["nan", "inf"])
def test_update_movie_non_finite_rate_rejected(client, make_genre, make_movie, rate):
    genre = make_genre("Drama")
    movie_id = make_movie(genre, rate=6.5).id

    response = client.put(f"/api/movies/{movie_id}", data=_form(genre.id, Rate=rate))
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_FAILED"

    details = client.get(f"/api/movies/{movie_id}")
    assert details.status_code == 200
    assert details.json()["data"]["rate"] == 6.5

def test_create_movie_year_out_of_range(client, make_genre):
    genre = make_genre("Action")
    response = client.post(
        "/api/movies",
        data=_form(genre.id, Year="99999999999999999999"),
        files=_poster(),
    )
    assert response.status_code == 400
    assert "body.Year" in response.json()["details"]

def test_update_movie_year_out_of_range(client, make_genre, make_movie):
    genre = make_genre("Drama")
    movie_id = make_movie(genre).id
    response = client.put(f"/api/movies/{movie_id}", data=_form(genre.id, Year="-5"))
    assert response.status_code == 400

@pytest.mark.parametrize("method", ["get", "delete"])
def test_movie_id_out_of_range(client, method):
    response = getattr(client, method)("/api/movies/99999999999999999999")
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_FAILED"

def test_update_movie_id_out_of_range(client, make_genre):
    genre = make_genre("Drama")
    response = client.put("/api/movies/2147483648", data=_form(genre.id))
    assert response.status_code == 400
