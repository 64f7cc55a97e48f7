import logging
from typing import List

from supabase import Client, create_client

from zentro.config import settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the object store rejects or fails a request."""


class SupabaseStorage:
    """Thin wrapper over the Supabase Storage buckets used for property media."""

    def __init__(self, client: Client):
        self.client = client

    def upload(
        self,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str,
        cache_control: str = "3600",
        upsert: bool = False,
    ) -> None:
        try:
            self.client.storage.from_(bucket).upload(
                path,
                data,
                file_options={
                    "cache-control": cache_control,
                    "content-type": content_type,
                    "upsert": "true" if upsert else "false",
                },
            )
        except Exception as exc:
            raise StorageError(f"Upload of {path} to {bucket} failed: {exc}") from exc

    def get_public_url(self, bucket: str, path: str) -> str:
        url = self.client.storage.from_(bucket).get_public_url(path)
        # some storage3 releases append an empty query string
        return url.rstrip("?")

    def remove(self, bucket: str, paths: List[str]) -> None:
        try:
            self.client.storage.from_(bucket).remove(paths)
        except Exception as exc:
            raise StorageError(f"Removal of {paths} from {bucket} failed: {exc}") from exc


def create_supabase_storage() -> SupabaseStorage:
    client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
    logger.info("Supabase storage client initialised for %s", settings.SUPABASE_URL)
    return SupabaseStorage(client)
