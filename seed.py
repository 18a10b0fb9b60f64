import base64

from sqlmodel import Session, select

# 앱 설정 및 모델 임포트
from movies_api.db.session import engine, init_db
from movies_api.db.models import Genre, Movie

# 1x1 투명 PNG (샘플 포스터)
SAMPLE_POSTER = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


def create_genres(db: Session):
    print("Creating genres...")
    names = [
        "Action",
        "Adventure",
        "Animation",
        "Comedy",
        "Crime",
        "Drama",
        "Horror",
        "Science Fiction",
        "Thriller",
    ]

    for name in names:
        if not db.exec(select(Genre).where(Genre.name == name)).first():
            db.add(Genre(name=name))

    db.commit()


def create_movies(db: Session):
    print("Creating movies...")

    # 예시 영화 데이터
    movies = [
        {
            "title": "The Matrix",
            "year": 1999,
            "rate": 8.7,
            "storeline": "A hacker learns the world he lives in is a simulation.",
            "genre": "Science Fiction",
        },
        {
            "title": "Inception",
            "year": 2010,
            "rate": 8.8,
            "storeline": "A thief steals secrets by entering people's dreams.",
            "genre": "Action",
        },
        {
            "title": "Interstellar",
            "year": 2014,
            "rate": 8.6,
            "storeline": "Explorers travel through a wormhole to save humanity.",
            "genre": "Adventure",
        },
        {
            "title": "Parasite",
            "year": 2019,
            "rate": 8.5,
            "storeline": "A poor family schemes to work for a wealthy household.",
            "genre": "Thriller",
        },
    ]

    for m in movies:
        if db.exec(select(Movie).where(Movie.title == m["title"])).first():
            continue
        genre = db.exec(select(Genre).where(Genre.name == m["genre"])).first()
        if not genre:
            continue
        db.add(
            Movie(
                title=m["title"],
                year=m["year"],
                rate=m["rate"],
                storeline=m["storeline"],
                poster=SAMPLE_POSTER,
                genre_id=genre.id,
            )
        )

    db.commit()


def main():
    print("Initialize DB Session...")
    init_db()
    with Session(engine) as session:
        create_genres(session)
        create_movies(session)
    print("Seed data created successfully!")


if __name__ == "__main__":
    main()
