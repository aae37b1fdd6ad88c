from cv_optimizer.extraction.base import BaseTextExtractor


class PlainTextExtractor(BaseTextExtractor):
    """Decodes text uploads as UTF-8, replacing undecodable bytes."""

    def extract(self, raw_bytes: bytes) -> str:
        text = raw_bytes.decode("utf-8", errors="replace")
        return text.lstrip("\ufeff").replace("\r\n", "\n").strip()
