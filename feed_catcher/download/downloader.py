"""
Streaming download of a single feed item.
"""

import traceback
from pathlib import Path
from typing import Optional

import requests
from tqdm import tqdm

from feed_catcher import config
from feed_catcher.download.models import DownloadModel
from feed_catcher.logging_config import setup_logging

logger = setup_logging(__name__)


def _remove_partial_file(file_path: Path) -> None:
    """Delete an incomplete download so it is not mistaken for a finished one."""
    try:
        file_path.unlink()
        logger.info(f"Removed incomplete file {str(file_path)!r}")
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error(f"Unable to remove incomplete file {str(file_path)!r}. Error: {e}")


def _is_inside(path: Path, root_path: Path) -> bool:
    """Return True if path resolves to a location below root_path."""
    try:
        path.resolve().relative_to(Path(root_path).resolve())
    except ValueError:
        return False
    return True


def _stream_to_file(response: requests.Response, file_path: Path, chunk_size: int, show_progress: bool) -> None:
    """
    Write the response body to a new file.

    Raises:
    FileExistsError: If the file appeared after the existence check
    requests.RequestException: For errors while reading the body
    OSError: For errors while opening or writing the file

    Any other exception, e.g. KeyboardInterrupt, propagates unchanged.
    """
    total_size = int(response.headers.get('Content-Length', 0) or 0)

    # 'xb' claims the path atomically; the file object is buffered
    with open(file_path, 'xb') as f, \
            tqdm(total=total_size or None, unit='B', unit_scale=True,
                 desc=file_path.name[:40], leave=False, disable=not show_progress) as bar:
        for chunk in response.iter_content(chunk_size=chunk_size):
            if chunk:
                f.write(chunk)
                bar.update(len(chunk))


def download(
    model: DownloadModel,
    root_path: Path,
    timeout=None,
    chunk_size: Optional[int] = None,
    show_progress: Optional[bool] = None
) -> str:
    """
    Download one item to {root_path}/{folder_name}/{file_name}.

    Every failure is logged and reported through the return value, never
    raised, so the caller can carry on with the next item. An existing
    target file is never touched. A transfer that fails midway is removed
    again; on KeyboardInterrupt the partial file is removed before the
    interrupt propagates.

    Parameters:
    model: Download model of the item
    root_path: Download root directory
    timeout: requests timeout (default: config.DOWNLOAD_TIMEOUT)
    chunk_size: Streaming chunk size in bytes (default: config.CHUNK_SIZE)
    show_progress: Show a tqdm progress bar (default: config.SHOW_PROGRESS)

    Returns:
    str: One of config.DOWNLOAD_STATUS_DOWNLOADED, DOWNLOAD_STATUS_EXISTS
    or DOWNLOAD_STATUS_FAILED
    """
    if timeout is None:
        timeout = config.DOWNLOAD_TIMEOUT
    if chunk_size is None:
        chunk_size = config.CHUNK_SIZE
    if show_progress is None:
        show_progress = config.SHOW_PROGRESS

    try:
        response = requests.get(model.source_url, stream=True, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Unable to download item {str(model)!r}. Error: {e}")
        logger.debug(traceback.format_exc())
        return config.DOWNLOAD_STATUS_FAILED

    with response:
        folder = Path(root_path) / model.folder_name
        file_path = folder / model.file_name

        if not _is_inside(file_path, root_path):
            logger.error(f"Refusing to write item {str(model)!r} outside of {str(root_path)!r}.")
            return config.DOWNLOAD_STATUS_FAILED

        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Unable to create folder {str(folder)!r}. Error: {e}")
            logger.debug(traceback.format_exc())
            return config.DOWNLOAD_STATUS_FAILED

        if file_path.exists():
            logger.info(f"Skipping item {str(model)!r}. The file has already been downloaded before.")
            return config.DOWNLOAD_STATUS_EXISTS

        logger.info(f"Downloading item {str(model)!r} to {str(file_path)!r}.")

        try:
            _stream_to_file(response, file_path, chunk_size, show_progress)
        except FileExistsError:
            logger.info(f"Skipping item {str(model)!r}. The file has already been downloaded before.")
            return config.DOWNLOAD_STATUS_EXISTS
        except requests.RequestException as e:
            logger.error(f"Download of item {str(model)!r} was interrupted. Error: {e}")
            logger.debug(traceback.format_exc())
            _remove_partial_file(file_path)
            return config.DOWNLOAD_STATUS_FAILED
        except OSError as e:
            logger.error(f"Unable to write file {str(file_path)!r}. Error: {e}")
            logger.debug(traceback.format_exc())
            _remove_partial_file(file_path)
            return config.DOWNLOAD_STATUS_FAILED
        except BaseException:
            _remove_partial_file(file_path)
            raise

    logger.info(f"Successfully downloaded {str(model)!r}")
    return config.DOWNLOAD_STATUS_DOWNLOADED
