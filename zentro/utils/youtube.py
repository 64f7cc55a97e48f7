import re
from typing import Optional, Tuple

# watch?v=, youtu.be/, embed/ and shorts/ links followed by an 11 char video id
YOUTUBE_URL_PATTERN = re.compile(
    r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/|youtube\.com/shorts/)"
    r"([a-zA-Z0-9_-]{11})"
)


def validate_youtube_url(url: Optional[str]) -> Tuple[bool, str]:
    if not url:
        return False, "No URL provided"
    if YOUTUBE_URL_PATTERN.search(url):
        return True, "Valid YouTube URL"
    return False, "Invalid YouTube URL format"


def extract_youtube_id(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    match = YOUTUBE_URL_PATTERN.search(url)
    return match.group(1) if match else None
