from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    video_id: str
    title: str


@dataclass(frozen=True)
class ItemStatistics:
    video_id: str
    title: str
    views: int
    likes: int
    comment_count: int
    suspicious: bool


@dataclass(frozen=True)
class RankedResult:
    video_id: str
    title: str
    engagement: float
    sentiment: float  # [-1, 1]
    suspicious: bool
    composite_score: float
    # kept for recommendation reasons, not serialized
    views: int = 0
    likes: int = 0

    @property
    def url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.video_id}"

    def to_dict(self) -> dict:
        return {
            "id": self.video_id,
            "title": self.title,
            "engagement": self.engagement,
            "sentiment": self.sentiment,
            "suspicious": self.suspicious,
            "compositeScore": self.composite_score,
        }
