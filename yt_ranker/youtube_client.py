from __future__ import annotations

import logging
import threading
from typing import Any, Callable, List, Optional

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from yt_ranker.config import DEFAULT_DURATION, DEFAULT_MAX_COMMENTS, DEFAULT_MAX_RESULTS, DEFAULT_TIMEOUT
from yt_ranker.models import Candidate, ItemStatistics
from yt_ranker.services.suspicion import is_suspicious

logger = logging.getLogger(__name__)

# transport-level failures; malformed payloads are checked while parsing
_FETCH_ERRORS = (HttpError, httplib2.HttpLib2Error, OSError)

VALID_DURATIONS = {"any", "short", "medium", "long"}


class YouTubeClient:
    """
    Thin wrapper around YouTube Data API v3 calls.
    Responsibilities:
      - search for candidate videos on a topic
      - fetch per-video statistics and a comment sample

    Transport failures and malformed payloads are logged and turned into
    empty/None results; callers never see them.

    The discovery service is built once per thread: httplib2 connections are
    not thread-safe, and the ranking service fans out over a thread pool.
    """

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        service_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._service_factory = service_factory or self._build_service
        self._local = threading.local()

    def _build_service(self) -> Any:
        http = httplib2.Http(timeout=self._timeout)
        return build("youtube", "v3", developerKey=self._api_key, http=http)

    @property
    def _service(self) -> Any:
        service = getattr(self._local, "service", None)
        if service is None:
            service = self._service_factory()
            self._local.service = service
        return service

    def search(
        self,
        topic: str,
        max_results: int = DEFAULT_MAX_RESULTS,
        duration: str = DEFAULT_DURATION,
    ) -> List[Candidate]:
        if max_results < 1:
            max_results = 1
        if max_results > 50:
            max_results = 50

        params = dict(part="snippet", q=topic, type="video", maxResults=max_results)
        if duration and duration != "any":
            params["videoDuration"] = duration

        try:
            resp = self._service.search().list(**params).execute()
        except _FETCH_ERRORS as e:
            logger.warning(f"Search failed for {topic!r}: {e}")
            return []

        items = _items(resp)
        if items is None:
            logger.warning(f"Malformed search response for {topic!r}")
            return []

        candidates: List[Candidate] = []
        seen = set()
        for item in items:
            if not isinstance(item, dict):
                continue
            vid = _field(item, "id").get("videoId")
            if not vid or not isinstance(vid, str) or vid in seen:
                continue
            seen.add(vid)
            title = _field(item, "snippet").get("title") or ""
            candidates.append(Candidate(video_id=vid, title=str(title)))

        logger.debug(f"Search {topic!r} returned {len(candidates)} candidates")
        return candidates

    def fetch_statistics(self, video_id: str) -> Optional[ItemStatistics]:
        """
        Returns None when the video is gone, private, malformed or unreachable.
        """
        try:
            resp = self._service.videos().list(part="snippet,statistics", id=video_id).execute()
        except _FETCH_ERRORS as e:
            logger.warning(f"Statistics fetch failed for {video_id}: {e}")
            return None

        items = _items(resp)
        if items is None:
            logger.warning(f"Malformed statistics response for {video_id}")
            return None
        if not items:
            logger.debug(f"No statistics for {video_id}")
            return None

        item = items[0]
        if not isinstance(item, dict):
            logger.warning(f"Malformed statistics item for {video_id}")
            return None

        snippet = item.get("snippet") or {}
        stats = item.get("statistics") or {}
        if not isinstance(snippet, dict) or not isinstance(stats, dict):
            logger.warning(f"Malformed statistics item for {video_id}")
            return None

        # likes/comments may be hidden or disabled -> counter missing
        views = _safe_int(stats.get("viewCount"))
        likes = _safe_int(stats.get("likeCount"))
        comment_count = _safe_int(stats.get("commentCount"))

        return ItemStatistics(
            video_id=video_id,
            title=str(snippet.get("title") or ""),
            views=views,
            likes=likes,
            comment_count=comment_count,
            suspicious=is_suspicious(views, likes),
        )

    def fetch_comments(self, video_id: str, max_comments: int = DEFAULT_MAX_COMMENTS) -> List[str]:
        """
        Fetch up to max_comments top-level comments for a video.
        Note: comments may be disabled; returns what was gathered so far then.
        """
        if max_comments < 1:
            return []

        texts: List[str] = []
        page_token: Optional[str] = None

        # API maxResults up to 100 per request for commentThreads.list
        while len(texts) < max_comments:
            batch = min(100, max_comments - len(texts))

            req = self._service.commentThreads().list(
                part="snippet",
                videoId=video_id,
                maxResults=batch,
                pageToken=page_token,
                textFormat="plainText",
            )

            try:
                resp = req.execute()
            except _FETCH_ERRORS as e:
                logger.warning(f"Comment fetch failed for {video_id}: {e}")
                return texts

            items = _items(resp)
            if items is None:
                logger.warning(f"Malformed comment response for {video_id}")
                return texts

            for item in items:
                comment = _field(_field(_field(item, "snippet"), "topLevelComment"), "snippet")
                text = comment.get("textDisplay")
                if text and isinstance(text, str):
                    texts.append(text)

            page_token = resp.get("nextPageToken")
            if not page_token:
                break

        return texts[:max_comments]


def _items(resp) -> Optional[list]:
    """
    The "items" list of an API response, [] when absent.
    None when the body itself is not the expected JSON object (e.g. an HTML error page).
    """
    if not isinstance(resp, dict):
        return None
    items = resp.get("items") or []
    if not isinstance(items, list):
        return None
    return items


def _field(obj, key: str) -> dict:
    # nested objects may come back null or as the wrong type
    value = obj.get(key) if isinstance(obj, dict) else None
    return value if isinstance(value, dict) else {}


def _safe_int(value) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0
