import logging
import urllib.parse
from os import PathLike
from pathlib import Path

import requests
from tqdm import tqdm

logger = logging.getLogger(__name__)

# Bigger chunks keep progress bar updates infrequent
CHUNK_SIZE = 16384


class DownloadHelper:
    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout

    def download_file(
        self,
        url: str,
        filename: PathLike = None,
        directory: PathLike = None,
        show_progress: bool = True,
    ) -> Path:
        """
        Download a file from a url unless it already exists locally.

        :param url: URL that points to the file to download
        :param filename: Name of the local file, without directories. Defaults to the URL's file name
        :param directory: Directory to save into, created if missing. Defaults to the working directory
        :param show_progress: If True, show a tqdm progress bar
        :return: resolved path of the local file
        """
        filename = Path(filename or Path(urllib.parse.urlparse(url).path).name)
        if len(filename.parts) > 1:
            raise ValueError(
                "`filename` should refer to the name of the file, excluding the directory. "
                "Use the `directory` parameter to specify a target directory."
            )

        filepath = Path(directory) / filename if directory is not None else filename
        if filepath.exists():
            logger.debug("'%s' already exists, skipping download", filepath)
            return filepath.resolve()

        if directory is not None:
            Path(directory).mkdir(parents=True, exist_ok=True)

        try:
            response = requests.get(
                url=url, headers={"User-agent": "Mozilla/5.0"}, stream=True, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as error:
            raise RuntimeError(str(error)) from None
        except requests.exceptions.Timeout:
            raise RuntimeError(
                f"Connection to {url} timed out. Check the proxy settings if you are behind one."
            ) from None
        except requests.exceptions.RequestException as error:
            raise RuntimeError(f"File downloading failed with error: {error}") from None

        logger.info("Downloading %s -> %s", url, filepath)
        filesize = int(response.headers.get("Content-length", 0))
        # Only a complete download is moved onto filepath
        partial_path = filepath.with_suffix(filepath.suffix + ".part")
        try:
            with tqdm(
                total=filesize,
                unit="B",
                unit_scale=True,
                unit_divisor=1024,
                desc=str(filename),
                disable=not show_progress,
            ) as progress_bar:
                with open(partial_path, "wb") as file_object:
                    for chunk in response.iter_content(CHUNK_SIZE):
                        file_object.write(chunk)
                        progress_bar.update(len(chunk))
            partial_path.replace(filepath)
        except requests.exceptions.RequestException as error:
            partial_path.unlink(missing_ok=True)
            raise RuntimeError(f"File downloading failed with error: {error}") from None
        except BaseException:
            partial_path.unlink(missing_ok=True)
            raise
        finally:
            response.close()

        return filepath.resolve()
