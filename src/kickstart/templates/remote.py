"""External templates published as npm packages.

unpack_template() resolves the package's latest version on the chosen
registry, downloads its tarball and extracts the package contents into
the destination directory.
"""

import io
import logging
import tarfile
from pathlib import Path, PurePosixPath
from typing import Optional

import httpx

from kickstart.errors import TemplateError

logger = logging.getLogger(__name__)

TEMPLATE_SCOPE = "@umijs"
TARBALL_PREFIX = "package"
REQUEST_TIMEOUT = 60


def expand_template_name(template: str) -> str:
    """Expand a short template name ("electron") to its package name."""
    if template.startswith("@") or "/" in template:
        return template
    if template.endswith("-template"):
        return f"{TEMPLATE_SCOPE}/{template}"
    return f"{TEMPLATE_SCOPE}/{template}-template"


def package_metadata_url(registry: str, package: str) -> str:
    # scoped packages keep the @ but escape the slash
    return f"{registry.rstrip('/')}/{package.replace('/', '%2f')}"


def resolve_tarball_url(metadata: dict, package: str) -> str:
    """Pick the tarball of the latest dist-tag from registry metadata."""
    try:
        version = metadata["dist-tags"]["latest"]
        return metadata["versions"][version]["dist"]["tarball"]
    except (KeyError, TypeError):
        raise TemplateError(f"No published version found for {package}")


def extract_package(data: bytes, dest: Path) -> int:
    """Extract an npm tarball into dest, dropping the leading package/ folder.

    Returns:
        Number of files written

    Raises:
        TemplateError: If the archive is invalid or escapes dest
    """
    count = 0
    try:
        with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as tar:
            for member in tar.getmembers():
                parts = PurePosixPath(member.name).parts
                if parts and parts[0] == TARBALL_PREFIX:
                    parts = parts[1:]
                if not parts:
                    continue
                if member.name.startswith("/") or ".." in parts:
                    raise TemplateError(f"Unsafe path in template archive: {member.name}")
                out = dest.joinpath(*parts)
                if member.isdir():
                    out.mkdir(parents=True, exist_ok=True)
                    continue
                if not member.isfile():
                    continue
                source = tar.extractfile(member)
                if source is None:
                    continue
                out.parent.mkdir(parents=True, exist_ok=True)
                out.write_bytes(source.read())
                if member.mode & 0o111:
                    out.chmod(0o755)
                count += 1
    except tarfile.TarError as e:
        raise TemplateError(f"Invalid template archive: {e}") from e
    return count


def unpack_template(
    template: str,
    dest: Path,
    registry: str,
    client: Optional[httpx.Client] = None,
) -> None:
    """Download an external template package and unpack it into dest.

    Args:
        template: Package name or short template name
        dest: Target directory; must be missing or empty
        registry: Registry URL to download from
        client: Optional httpx client (tests pass a mocked transport)

    Raises:
        TemplateError: On a non-empty dest, network or archive failures
    """
    dest = Path(dest)
    if dest.exists() and any(dest.iterdir()):
        raise TemplateError(f"{dest} is not empty, please use an empty directory")

    package = expand_template_name(template)
    own_client = client is None
    if own_client:
        client = httpx.Client(timeout=REQUEST_TIMEOUT, follow_redirects=True)

    try:
        url = package_metadata_url(registry, package)
        logger.info("Fetching %s from %s", package, registry)
        response = client.get(url)
        if response.status_code != 200:
            raise TemplateError(f"Registry returned {response.status_code} for {package}")
        try:
            metadata = response.json()
        except ValueError as e:
            raise TemplateError(f"Failed to parse metadata of {package}: {e}") from e

        tarball_url = resolve_tarball_url(metadata, package)
        logger.debug("Downloading %s", tarball_url)
        response = client.get(tarball_url)
        if response.status_code != 200:
            raise TemplateError(f"Download failed with {response.status_code}: {tarball_url}")
    except httpx.HTTPError as e:
        raise TemplateError(f"Failed to download {package}: {e}") from e
    finally:
        if own_client:
            client.close()

    try:
        dest.mkdir(parents=True, exist_ok=True)
        count = extract_package(response.content, dest)
    except OSError as e:
        raise TemplateError(f"Failed to unpack {package}: {e}") from e
    logger.info("Unpacked %d files from %s", count, package)
