"""
Reponses simulees de l'API TMDB.

Contient des reponses realistes des endpoints /search/movie et /search/tv.
Ces fixtures sont utilisees avec respx pour simuler les appels httpx.
"""

# GET /search/movie?query=Inception
TMDB_MOVIE_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "id": 27205,
            "original_language": "en",
            "original_title": "Inception",
            "poster_path": "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
            "release_date": "2010-07-15",
            "title": "Inception",
            "vote_average": 8.369,
            "vote_count": 35000,
        },
        {
            "adult": False,
            "id": 613092,
            "original_language": "en",
            "original_title": "Inception: The Cobol Job",
            "poster_path": None,
            "release_date": "",
            "title": "Inception: The Cobol Job",
            "vote_average": 0,
            "vote_count": 0,
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

# GET /search/tv?query=Breaking Bad
TMDB_TV_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 1396,
            "name": "Breaking Bad",
            "original_name": "Breaking Bad",
            "first_air_date": "2008-01-20",
            "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
            "vote_average": 8.9,
            "vote_count": 14000,
        }
    ],
    "total_pages": 1,
    "total_results": 1,
}

TMDB_SEARCH_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# 12 resultats pour verifier la limite de 10
TMDB_MANY_RESULTS_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 1000 + i,
            "title": f"Movie {i}",
            "release_date": "2001-01-01",
            "poster_path": None,
            "vote_average": 5.0,
        }
        for i in range(12)
    ],
}
