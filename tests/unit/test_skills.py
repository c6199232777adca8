"""
Unit tests for skill discovery and parsing.
"""

import logging
import os
from pathlib import Path

import pytest

from skills_loader.skills import (
    DEFAULT_DESCRIPTION,
    Skill,
    SkillOrigin,
    SkillParseError,
    discover_skills,
    find_skill_files,
    parse_skill_file,
    parse_skill_frontmatter,
    parse_yaml_frontmatter,
    read_skill_content,
    resolve_entry,
)


# =============================================================================
# Model Tests
# =============================================================================


class TestSkill:
    """Tests for Skill model."""

    def test_key_combines_origin_and_name(self, temp_dir):
        """Test the cache key format."""
        skill = Skill(
            name="code-review",
            description="Reviews code",
            path=temp_dir / "code-review" / "SKILL.md",
            origin=SkillOrigin.LOCAL,
        )
        assert skill.key == "local:code-review"
        assert skill.directory == temp_dir / "code-review"

    def test_same_name_different_origin(self, temp_dir):
        """Test that origin distinguishes skills with the same name."""
        path = temp_dir / "SKILL.md"
        global_skill = Skill(name="x", path=path, origin=SkillOrigin.GLOBAL)
        local_skill = Skill(name="x", path=path, origin=SkillOrigin.LOCAL)
        assert global_skill.key != local_skill.key

    def test_skill_is_immutable(self, temp_dir):
        """Test that skills cannot be modified after creation."""
        skill = Skill(name="x", path=temp_dir / "SKILL.md", origin=SkillOrigin.GLOBAL)
        with pytest.raises(Exception):
            skill.name = "y"


# =============================================================================
# Parser Tests
# =============================================================================


class TestParseYamlFrontmatter:
    """Tests for frontmatter parsing."""

    def test_valid_frontmatter(self, sample_skill_md):
        """Test parsing valid frontmatter."""
        frontmatter, body = parse_yaml_frontmatter(sample_skill_md)
        assert frontmatter == {
            "name": "test-skill",
            "description": "A test skill for unit tests",
        }
        assert body.startswith("# Test Skill")

    def test_no_frontmatter(self):
        """Test content without frontmatter."""
        content = "# Just markdown\n\nNo header here."
        frontmatter, body = parse_yaml_frontmatter(content)
        assert frontmatter is None
        assert body == content

    def test_unclosed_frontmatter(self):
        """Test frontmatter without a closing delimiter."""
        content = "---\nname: test\n\nNo closing delimiter"
        frontmatter, body = parse_yaml_frontmatter(content)
        assert frontmatter is None
        assert body == content

    def test_byte_order_mark(self):
        """Test that a leading BOM does not hide the frontmatter."""
        frontmatter, body = parse_yaml_frontmatter("\ufeff---\nname: bom-skill\n---\nBody")
        assert frontmatter == {"name": "bom-skill"}
        assert body == "Body"

    def test_empty_frontmatter(self):
        """Test an empty frontmatter block."""
        frontmatter, body = parse_yaml_frontmatter("---\n---\nBody")
        assert frontmatter == {}
        assert body == "Body"

    def test_invalid_yaml(self):
        """Test that broken YAML raises a parse error."""
        with pytest.raises(SkillParseError):
            parse_yaml_frontmatter("---\nname: [unclosed\n---\nBody")

    def test_non_mapping_frontmatter(self):
        """Test that a YAML list is rejected."""
        with pytest.raises(SkillParseError, match="mapping"):
            parse_yaml_frontmatter("---\n- one\n- two\n---\nBody")


class TestParseSkillFrontmatter:
    """Tests for typed frontmatter parsing."""

    def test_both_fields(self, sample_skill_md):
        """Test parsing name and description."""
        frontmatter, _ = parse_skill_frontmatter(sample_skill_md)
        assert frontmatter.name == "test-skill"
        assert frontmatter.description == "A test skill for unit tests"

    def test_missing_fields_are_none(self):
        """Test that absent fields come back as None."""
        frontmatter, _ = parse_skill_frontmatter("---\nversion: 2\n---\nBody")
        assert frontmatter.name is None
        assert frontmatter.description is None

    def test_empty_values_are_none(self):
        """Test that blank values are treated as absent."""
        frontmatter, _ = parse_skill_frontmatter('---\nname: ""\ndescription:\n---\nBody')
        assert frontmatter.name is None
        assert frontmatter.description is None

    def test_non_string_values_converted(self):
        """Test that scalar values become strings."""
        frontmatter, _ = parse_skill_frontmatter("---\nname: 42\n---\nBody")
        assert frontmatter.name == "42"


class TestParseSkillFile:
    """Tests for parsing SKILL.md into a Skill."""

    def test_parse_with_header(self, temp_dir, make_skill):
        """Test that header values are used."""
        path = make_skill(temp_dir, "some-dir", name="git-helper", description="Git tips")
        skill = parse_skill_file(path, SkillOrigin.GLOBAL)
        assert skill.name == "git-helper"
        assert skill.description == "Git tips"
        assert skill.path == path
        assert skill.origin == SkillOrigin.GLOBAL

    def test_missing_header_falls_back(self, temp_dir, make_skill):
        """Test fallbacks for a manifest without a header."""
        path = make_skill(temp_dir, "plain-skill")
        skill = parse_skill_file(path, SkillOrigin.LOCAL)
        assert skill.name == "plain-skill"
        assert skill.description == DEFAULT_DESCRIPTION
        assert DEFAULT_DESCRIPTION == "No description provided"

    def test_missing_name_uses_directory(self, temp_dir, make_skill):
        """Test name fallback when only description is present."""
        path = make_skill(temp_dir, "dir-name", description="Has a description")
        skill = parse_skill_file(path, SkillOrigin.GLOBAL)
        assert skill.name == "dir-name"
        assert skill.description == "Has a description"

    def test_manifest_with_byte_order_mark(self, temp_dir):
        """Test that header values are read from a BOM-prefixed file."""
        skill_dir = temp_dir / "bom-dir"
        skill_dir.mkdir()
        (skill_dir / "SKILL.md").write_bytes(b"\xef\xbb\xbf---\nname: bom-skill\ndescription: Saved by Notepad\n---\nBody\n")
        skill = parse_skill_file(skill_dir / "SKILL.md", SkillOrigin.GLOBAL)
        assert skill.name == "bom-skill"
        assert skill.description == "Saved by Notepad"

    def test_unreadable_file(self, temp_dir):
        """Test that a missing file raises a parse error."""
        with pytest.raises(SkillParseError):
            parse_skill_file(temp_dir / "nope" / "SKILL.md", SkillOrigin.GLOBAL)

    def test_invalid_encoding(self, temp_dir):
        """Test that a non-UTF-8 file raises a parse error."""
        skill_dir = temp_dir / "binary"
        skill_dir.mkdir()
        (skill_dir / "SKILL.md").write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(SkillParseError):
            parse_skill_file(skill_dir / "SKILL.md", SkillOrigin.GLOBAL)


# =============================================================================
# Scanner Tests
# =============================================================================


class TestResolveEntry:
    """Tests for symlink resolution."""

    def test_regular_path_unchanged(self, temp_dir):
        """Test that a non-link is returned as-is."""
        target = temp_dir / "dir"
        target.mkdir()
        assert resolve_entry(target) == target

    def test_symlink_resolved(self, temp_dir):
        """Test that a symlink resolves to its target."""
        target = temp_dir / "target"
        target.mkdir()
        link = temp_dir / "link"
        link.symlink_to(target)
        assert resolve_entry(link) == target.resolve()

    def test_broken_symlink(self, temp_dir):
        """Test that a dangling link is reported as unresolvable."""
        link = temp_dir / "broken"
        link.symlink_to(temp_dir / "missing")
        assert resolve_entry(link) is None


class TestFindSkillFiles:
    """Tests for scanning a skills directory."""

    def test_missing_directory(self, temp_dir):
        """Test that a missing root yields nothing."""
        assert find_skill_files(temp_dir / "does-not-exist") == []

    def test_empty_directory(self, global_skills_dir):
        """Test that an empty root yields nothing."""
        assert find_skill_files(global_skills_dir) == []

    def test_no_matching_entries(self, global_skills_dir):
        """Test that unrelated entries are ignored."""
        (global_skills_dir / "notes.txt").write_text("hello")
        (global_skills_dir / "empty-dir").mkdir()
        (global_skills_dir / "other").mkdir()
        (global_skills_dir / "other" / "README.md").write_text("not a skill")
        assert find_skill_files(global_skills_dir) == []

    def test_skill_directories(self, global_skills_dir, make_skill):
        """Test that directories with SKILL.md are found."""
        a = make_skill(global_skills_dir, "alpha")
        b = make_skill(global_skills_dir, "beta")
        assert find_skill_files(global_skills_dir) == [a, b]

    def test_bare_manifest(self, global_skills_dir):
        """Test that a SKILL.md directly under the root is found."""
        bare = global_skills_dir / "SKILL.md"
        bare.write_text("# Root skill")
        assert find_skill_files(global_skills_dir) == [bare]

    def test_symlinked_skill_directory(self, temp_dir, global_skills_dir, make_skill):
        """Test that linked skill directories are followed."""
        target = make_skill(temp_dir / "elsewhere", "linked")
        (global_skills_dir / "linked").symlink_to(target.parent)
        assert find_skill_files(global_skills_dir) == [target.resolve()]

    def test_broken_symlink_skipped(self, global_skills_dir, make_skill):
        """Test that dangling links are skipped without error."""
        (global_skills_dir / "dangling").symlink_to(global_skills_dir / "missing")
        real = make_skill(global_skills_dir, "real")
        assert find_skill_files(global_skills_dir) == [real]

    def test_file_root(self, temp_dir):
        """Test that a file passed as root yields nothing."""
        root = temp_dir / "file"
        root.write_text("x")
        assert find_skill_files(root) == []


class TestDiscoverSkills:
    """Tests for discovery across both roots."""

    def test_global_then_local(self, global_skills_dir, local_skills_dir, make_skill):
        """Test that both roots are scanned with their origin."""
        make_skill(global_skills_dir, "g1", name="global-one")
        make_skill(local_skills_dir, "l1", name="local-one")

        skills = discover_skills(global_skills_dir, local_skills_dir)

        assert [(s.name, s.origin) for s in skills] == [
            ("global-one", SkillOrigin.GLOBAL),
            ("local-one", SkillOrigin.LOCAL),
        ]

    def test_missing_roots(self, temp_dir):
        """Test that missing roots are not an error."""
        assert discover_skills(temp_dir / "a", temp_dir / "b") == []

    def test_bad_manifest_skipped(self, global_skills_dir, local_skills_dir, make_skill, caplog):
        """Test that one bad manifest does not abort the scan."""
        bad_dir = global_skills_dir / "broken"
        bad_dir.mkdir()
        (bad_dir / "SKILL.md").write_text("---\nname: [oops\n---\nBody")
        make_skill(global_skills_dir, "good", name="good")

        with caplog.at_level(logging.WARNING, logger="skills_loader"):
            skills = discover_skills(global_skills_dir, local_skills_dir)

        assert [s.name for s in skills] == ["good"]
        assert "Failed to parse skill" in caplog.text
        assert "broken" in caplog.text


# =============================================================================
# Content Tests
# =============================================================================


class TestReadSkillContent:
    """Tests for reading selected skills."""

    def test_main_content_verbatim(self, temp_dir, make_skill):
        """Test that the manifest is read without changes."""
        path = make_skill(temp_dir, "s", name="s", body="Use <tags> & {braces} $VARS\n")
        skill = parse_skill_file(path, SkillOrigin.GLOBAL)

        content = read_skill_content(skill)

        assert content.main_content == path.read_text()
        assert content.references == []

    def test_references_in_name_order(self, temp_dir, make_skill):
        """Test that reference files are read in file name order."""
        path = make_skill(
            temp_dir,
            "s",
            references={"b-guide.md": "second", "a-api.md": "first"},
        )
        (path.parent / "references" / "nested").mkdir()
        skill = parse_skill_file(path, SkillOrigin.GLOBAL)

        content = read_skill_content(skill)

        assert [(r.name, r.content) for r in content.references] == [
            ("a-api.md", "first"),
            ("b-guide.md", "second"),
        ]

    def test_unreadable_reference_skipped(self, temp_dir, make_skill):
        """Test that binary reference files are skipped."""
        path = make_skill(temp_dir, "s", references={"ok.md": "fine"})
        (path.parent / "references" / "image.bin").write_bytes(b"\xff\xd8\xff\x00")
        skill = parse_skill_file(path, SkillOrigin.GLOBAL)

        content = read_skill_content(skill)

        assert [r.name for r in content.references] == ["ok.md"]

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_references_through_symlink(self, temp_dir, global_skills_dir, make_skill):
        """Test that references are found next to a linked skill."""
        target = make_skill(temp_dir / "elsewhere", "linked", references={"r.md": "ref"})
        (global_skills_dir / "linked").symlink_to(target.parent)
        skills = discover_skills(global_skills_dir, Path(temp_dir / "none"))

        content = read_skill_content(skills[0])

        assert [r.name for r in content.references] == ["r.md"]
