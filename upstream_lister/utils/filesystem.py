"""
파일시스템 추상화 모듈

임시 디렉토리 생성과 재귀 삭제를 제공합니다. 테스트에서는 기준 디렉토리를
지정하여 생성된 리소스를 검사할 수 있습니다.
"""

import os
import shutil
import stat
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from .logging import get_logger

logger = get_logger(__name__)


class FileSystem(ABC):
    """임시 리소스용 파일시스템 추상 클래스"""

    @abstractmethod
    def temp_dir(self, prefix: str) -> Path:
        """
        고유한 이름의 임시 디렉토리 생성 (추상 메서드)

        Args:
            prefix: 디렉토리 이름 접두사

        Returns:
            생성된 디렉토리 경로

        Raises:
            OSError: 디렉토리 생성 실패
        """

    @abstractmethod
    def remove_all(self, path: Union[str, Path]) -> None:
        """
        경로를 재귀적으로 삭제 (추상 메서드, 없는 경로는 무시)

        Args:
            path: 삭제할 경로
        """


class OsFileSystem(FileSystem):
    """운영체제 파일시스템 구현"""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        """
        Args:
            base_dir: 임시 디렉토리를 만들 상위 경로 (None이면 시스템 기본값)
        """
        self.base_dir = Path(base_dir) if base_dir else None

    def temp_dir(self, prefix: str) -> Path:
        return Path(tempfile.mkdtemp(prefix=prefix, dir=self.base_dir))

    def remove_all(self, path: Union[str, Path]) -> None:
        path = Path(path)
        if not path.exists():
            return

        # go 모듈 캐시는 읽기 전용으로 기록되므로 먼저 쓰기 권한 부여
        _make_writable(path)
        shutil.rmtree(path)


def _make_writable(root: Path) -> None:
    """디렉토리 트리 전체에 소유자 쓰기 권한 부여"""
    _chmod_add(str(root), stat.S_IRWXU)
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames:
            _chmod_add(os.path.join(dirpath, name), stat.S_IRWXU)
        for name in filenames:
            _chmod_add(os.path.join(dirpath, name), stat.S_IRUSR | stat.S_IWUSR)


def _chmod_add(path: str, bits: int) -> None:
    if os.path.islink(path):
        return
    try:
        os.chmod(path, os.stat(path).st_mode | bits)
    except OSError as e:
        logger.debug(f"권한 변경 실패: {path} - {e}")
