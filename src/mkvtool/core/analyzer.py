"""Track analysis using mkvmerge --identify."""

import json
import subprocess
from pathlib import Path

from mkvtool.models.track import Track
from mkvtool.utils.logger import get_logger

logger = get_logger(__name__)

# mkvmerge exits with 1 when it only emitted warnings.
MKVMERGE_ERROR_RETURNCODE = 2


class MatroskaAnalyzer:
    """List the tracks in a Matroska file.

    Track numbers are reported as mkvmerge does, starting at zero.
    """

    def __init__(self, timeout_seconds: int = 60):
        self.timeout_seconds = timeout_seconds

    def identify(self, file_path: Path) -> dict:
        """Return the decoded JSON identification output for a file.

        Raises:
            FileNotFoundError: If file doesn't exist
            subprocess.CalledProcessError: If mkvmerge fails
            subprocess.TimeoutExpired: If mkvmerge takes too long
            json.JSONDecodeError: If the output is not valid JSON
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        cmd = ["mkvmerge", "--identify", "-F", "json", str(file_path)]
        logger.debug("Identifying file", file=str(file_path), command=cmd)

        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=self.timeout_seconds
            )
            if result.returncode >= MKVMERGE_ERROR_RETURNCODE:
                raise subprocess.CalledProcessError(
                    result.returncode, cmd, output=result.stdout, stderr=result.stderr
                )
            return json.loads(result.stdout)

        except subprocess.TimeoutExpired:
            logger.error("mkvmerge timeout", file=str(file_path), timeout=self.timeout_seconds)
            raise
        except subprocess.CalledProcessError as e:
            logger.error(
                "mkvmerge failed",
                file=str(file_path),
                returncode=e.returncode,
                output=e.output,
            )
            raise
        except json.JSONDecodeError as e:
            logger.error("Error decoding JSON output from mkvmerge", file=str(file_path), error=str(e))
            raise

    def analyze(self, file_path: Path) -> list[Track]:
        """Extract track information from a Matroska file.

        Args:
            file_path: Path to the file

        Returns:
            List of Track objects, in file order
        """
        data = self.identify(file_path)

        tracks = []
        for entry in data.get("tracks", []):
            props = entry.get("properties", {})
            tracks.append(
                Track(
                    index=entry["id"],
                    type=entry.get("type", ""),
                    language=props.get("language", ""),
                    name=props.get("track_name", ""),
                    codec=entry.get("codec", ""),
                    is_default=bool(props.get("default_track", False)),
                    uid=props.get("uid"),
                )
            )

        logger.info(
            "Tracks analyzed",
            file=str(file_path),
            track_count=len(tracks),
            languages=[t.language for t in tracks],
        )
        return tracks
