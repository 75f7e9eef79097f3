"""Sample active schedule used by `showsync seed`.

Six movies at Downtown Cinema 7. Dune: Part Two plays twice, at different
start times, so the same title appears under two match keys.
"""

from showsync.models.showtime import ShowtimeRecord


def _showtime(title: str, auditorium: str, start: str, end: str, fmt: str, rating: str) -> ShowtimeRecord:
    return ShowtimeRecord(
        theater_name="Downtown Cinema 7",
        movie_title=title,
        auditorium=auditorium,
        start_time=start,
        end_time=end,
        language="EN",
        format=fmt,
        rating=rating,
        last_updated="2025-03-10T12:00:00Z",
    )


SAMPLE_SCHEDULE: tuple[ShowtimeRecord, ...] = (
    _showtime("Spider-Man: Homecoming", "Auditorium 1", "2025-03-15T18:00:00Z", "2025-03-15T20:13:00Z", "2D", "PG-13"),
    _showtime("Inside Out 2", "Auditorium 2", "2025-03-15T17:30:00Z", "2025-03-15T19:20:00Z", "3D", "PG"),
    _showtime("Dune: Part Two", "Auditorium 1", "2025-03-15T20:00:00Z", "2025-03-15T22:46:00Z", "2D", "PG-13"),
    _showtime("Dune: Part Two", "Auditorium 1", "2025-03-15T22:45:00Z", "2025-03-16T01:31:00Z", "2D", "PG-13"),
    _showtime("Wonka", "Auditorium 3", "2025-03-15T16:00:00Z", "2025-03-15T17:56:00Z", "2D", "PG"),
    _showtime("Oppenheimer", "Auditorium 4", "2025-03-15T21:00:00Z", "2025-03-16T00:00:00Z", "IMAX", "PG-13"),
)
