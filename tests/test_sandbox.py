"""
실행 샌드박스 테스트 모듈

호출별 디렉토리 생성, 환경 변수 구성, 정리 동작을 테스트합니다.
"""

from unittest.mock import MagicMock

import pytest

from upstream_lister.exceptions import InternalException
from upstream_lister.lister.sandbox import SandboxBuilder, prepare_env
from upstream_lister.utils.filesystem import OsFileSystem


class TestPrepareEnv:
    """환경 변수 구성 테스트"""

    def test_overrides_module_cache(self, tmp_path):
        """모듈 캐시 재정의 테스트"""
        inherited = {"PATH": "/usr/bin", "HOME": "/home/server", "SECRET_TOKEN": "x"}

        env = prepare_env(tmp_path, None, ["GOPATH=/wrong", "GOPROXY=direct"], inherited)

        assert env["PATH"] == "/usr/bin"
        assert env["GOPROXY"] == "direct"
        assert env["GOPATH"] == str(tmp_path)
        assert env["GOMODCACHE"] == str(tmp_path / "pkg" / "mod")
        assert env["GOCACHE"] == str(tmp_path / "cache")
        assert env["GO111MODULE"] == "on"
        assert env["CGO_ENABLED"] == "0"
        # 전달 목록에 없는 변수는 상속하지 않음
        assert "SECRET_TOKEN" not in env

    def test_without_credentials_home_untouched(self, tmp_path):
        """인증 정보가 없으면 HOME 재정의 없음 테스트"""
        env = prepare_env(tmp_path, None, [], {"HOME": "/home/server"})

        assert env["HOME"] == "/home/server"

    def test_with_credentials_points_home_to_netrc_dir(self, tmp_path):
        """netrc 디렉토리로 HOME 재정의 테스트"""
        netrc_dir = tmp_path / "netrcp1"

        env = prepare_env(tmp_path / "gopath", netrc_dir, ["HOME=/configured"], {"HOME": "/home/server"})

        assert env["HOME"] == str(netrc_dir)

    def test_base_env_overrides_inherited(self, tmp_path):
        """설정된 기본 환경 우선 적용 테스트"""
        env = prepare_env(tmp_path, None, ["GOPROXY=https://proxy.example.org"], {"GOPROXY": "off"})

        assert env["GOPROXY"] == "https://proxy.example.org"


class TestSandboxBuilder:
    """샌드박스 생성기 테스트"""

    def test_build_creates_private_dirs(self, tmp_path):
        """작업/캐시 디렉토리 생성 테스트"""
        builder = SandboxBuilder(OsFileSystem(tmp_path), ["GOPROXY=direct"])

        ctx = builder.build()

        assert ctx.work_dir.is_dir()
        assert ctx.gopath.is_dir()
        assert ctx.work_dir != ctx.gopath
        assert ctx.work_dir.name.startswith("go-list")
        assert ctx.gopath.name.startswith("athens")
        assert ctx.env["GOPATH"] == str(ctx.gopath)
        assert ctx.netrc_dir is None

        ctx.cleanup()
        assert not ctx.work_dir.exists()
        assert not ctx.gopath.exists()

    def test_builds_are_disjoint(self, tmp_path):
        """호출 간 디렉토리 비공유 테스트"""
        builder = SandboxBuilder(OsFileSystem(tmp_path), [])

        first = builder.build()
        second = builder.build()

        first_paths = {first.work_dir, first.gopath}
        second_paths = {second.work_dir, second.gopath}
        assert first_paths.isdisjoint(second_paths)

        first.cleanup()
        second.cleanup()

    def test_context_manager_removes_netrc_dir(self, tmp_path):
        """컨텍스트 종료 시 netrc 디렉토리 삭제 테스트"""
        fs = OsFileSystem(tmp_path)
        netrc_dir = fs.temp_dir("netrcp")
        (netrc_dir / ".netrc").write_text("machine example.org login a password b\n")

        with SandboxBuilder(fs, []).build(netrc_dir) as ctx:
            assert ctx.env["HOME"] == str(netrc_dir)

        assert list(tmp_path.iterdir()) == []

    def test_second_dir_failure_cleans_first(self, tmp_path):
        """캐시 디렉토리 생성 실패 시 작업 디렉토리 정리 테스트"""
        work_dir = tmp_path / "go-list1"
        work_dir.mkdir()
        fs = MagicMock()
        fs.temp_dir.side_effect = [work_dir, OSError("공간 부족")]

        with pytest.raises(InternalException, match="모듈 캐시 디렉토리 생성 실패"):
            SandboxBuilder(fs, []).build(op="vcsLister.List")

        fs.remove_all.assert_called_once_with(work_dir)

    def test_first_dir_failure(self):
        """작업 디렉토리 생성 실패 테스트"""
        fs = MagicMock()
        fs.temp_dir.side_effect = OSError("권한 없음")

        with pytest.raises(InternalException, match="작업 디렉토리 생성 실패"):
            SandboxBuilder(fs, []).build()

        fs.remove_all.assert_not_called()

    def test_cleanup_continues_after_error(self, tmp_path):
        """삭제 실패 후에도 나머지 경로 정리 테스트"""
        fs = MagicMock()
        fs.temp_dir.side_effect = [tmp_path / "w", tmp_path / "g"]
        fs.remove_all.side_effect = [OSError("busy"), None]

        ctx = SandboxBuilder(fs, []).build()
        ctx.cleanup()

        assert fs.remove_all.call_count == 2
