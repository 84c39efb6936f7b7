"""Mirror a local directory into an S3 website bucket."""

import mimetypes
from collections.abc import Callable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from site_deploy.exceptions import BucketClearError, DeployError, LocalTreeError, UploadError

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Built-in table only, so results don't depend on the host's mime.types files
_MIME_TYPES = mimetypes.MimeTypes()


def content_type_for(path: Path | str) -> str:
  """Guess a Content-Type from the file extension."""
  content_type, _ = _MIME_TYPES.guess_type(Path(path).name)
  return content_type or DEFAULT_CONTENT_TYPE


@dataclass(frozen=True)
class LocalFile:
  """A file under the sync root and the object key it is uploaded as."""

  path: Path
  key: str

  @property
  def content_type(self) -> str:
    return content_type_for(self.path)

  def read_bytes(self) -> bytes:
    return self.path.read_bytes()


def walk_files(root: Path | str) -> Iterator[LocalFile]:
  """Yield every regular file under root, depth first in name order.

  Keys are paths relative to root using forward slashes. Directories are
  descended into once each, even when reached through a symlink, and
  anything that is neither a file nor a directory is skipped.

  Raises:
    LocalTreeError: If a directory cannot be listed.
  """
  root = Path(root)
  # Resolved directories already walked, so symlink loops are entered once
  visited: set[Path] = set()

  def _walk(directory: Path) -> Iterator[LocalFile]:
    try:
      visited.add(directory.resolve())
      entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
      raise LocalTreeError(str(directory)) from e

    for entry in entries:
      if entry.is_file():
        yield LocalFile(path=entry, key=entry.relative_to(root).as_posix())
      elif entry.is_dir() and entry.resolve() not in visited:
        yield from _walk(entry)

  yield from _walk(root)


@dataclass
class SyncResult:
  """Outcome of a completed sync."""

  deleted: int = 0
  uploaded: list[str] = field(default_factory=list)


class BucketSynchronizer:
  """Replace the contents of a bucket with a local directory tree."""

  def __init__(
    self,
    s3_client: Any,
    log: Callable[[str], None] = print,
    max_workers: int = 8,
  ) -> None:
    self.s3 = s3_client
    self.log = log
    self.max_workers = max_workers

  def clear_bucket(self, bucket: str) -> int:
    """Delete every object in the bucket, one page at a time.

    Each page is deleted before the next one is listed.

    Returns:
      Number of objects deleted.

    Raises:
      BucketClearError: If listing or deleting fails.
    """
    deleted = 0
    continuation_token = None

    try:
      while True:
        list_kwargs: dict[str, Any] = {"Bucket": bucket}
        if continuation_token:
          list_kwargs["ContinuationToken"] = continuation_token
        response = self.s3.list_objects_v2(**list_kwargs)

        contents = response.get("Contents", [])
        if not contents:
          break

        result = self.s3.delete_objects(
          Bucket=bucket,
          Delete={"Objects": [{"Key": obj["Key"]} for obj in contents]},
        )
        errors = result.get("Errors", [])
        if errors:
          failed = ", ".join(err.get("Key", "?") for err in errors)
          raise DeployError(f"Could not delete {failed}")

        deleted += len(contents)
        self.log(f"Successfully deleted {len(contents)} objects from {bucket} bucket")

        if not response.get("IsTruncated"):
          break
        continuation_token = response.get("NextContinuationToken")
    except (BotoCoreError, ClientError, DeployError) as e:
      self.log(f"Error in cleaning {bucket} bucket: {e}")
      raise BucketClearError(bucket) from e

    self.log(f"Successfully cleaned {bucket} bucket")
    return deleted

  def upload(self, bucket: str, local_file: LocalFile) -> None:
    """Upload a single file, replacing any object with the same key.

    Raises:
      UploadError: If the file cannot be read or the upload fails.
    """
    try:
      self.s3.put_object(
        Bucket=bucket,
        Key=local_file.key,
        Body=local_file.read_bytes(),
        ContentType=local_file.content_type,
      )
    except (BotoCoreError, ClientError, OSError) as e:
      self.log(f"Error in uploading {local_file.key} to s3 bucket: {e}")
      raise UploadError(local_file.key) from e

    self.log(f"Successfully uploaded {local_file.key} to s3 bucket")

  def sync_directory(self, bucket: str, local_root: Path | str) -> SyncResult:
    """Clear the bucket, then upload every file under local_root.

    Uploads run on a pool of max_workers threads once clearing has finished.
    Every upload is waited for; if any failed, the first failure in traversal
    order is raised afterwards.
    """
    local_root = Path(local_root)
    if not local_root.is_dir():
      raise DeployError(f"'{local_root}' is not a directory")

    result = SyncResult(deleted=self.clear_bucket(bucket))

    futures: list[tuple[LocalFile, Future[None]]] = []
    with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
      try:
        for local_file in walk_files(local_root):
          futures.append((local_file, pool.submit(self.upload, bucket, local_file)))
      except LocalTreeError as e:
        self.log(f"Error reading {e.path}")
        raise

    failures: list[UploadError] = []
    for local_file, future in futures:
      error = future.exception()
      if error is None:
        result.uploaded.append(local_file.key)
      elif isinstance(error, UploadError):
        failures.append(error)
      else:
        raise error

    if failures:
      self.log(f"{len(failures)} of {len(futures)} uploads to {bucket} failed")
      raise failures[0]

    self.log(f"Uploaded {len(result.uploaded)} files to {bucket} bucket")
    return result
