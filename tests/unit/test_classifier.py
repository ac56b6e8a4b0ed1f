from pathlib import Path

import pytest

from delete_rest.core import Classifier, KeepSet, partition
from delete_rest.models import FilterConfig, Label

CONFIG = FilterConfig.build("test", [r"IMG_(\d+)\.jpg"], ["jpg"])


def test_classify_camera_directory(tmp_path: Path) -> None:
    names = ["IMG_0001.jpg", "IMG_0016.jpg", "IMG_0017.jpg", "NOTES.txt"]
    paths = [tmp_path / name for name in names]
    classifier = Classifier(CONFIG, KeepSet.parse("1\n16\n"))

    results = classifier.classify_all(paths, tmp_path)
    groups = partition(results)

    assert [item.path.name for item in groups[Label.KEEP]] == ["IMG_0001.jpg", "IMG_0016.jpg"]
    assert [item.path.name for item in groups[Label.ACT]] == ["IMG_0017.jpg"]
    assert [item.path.name for item in groups[Label.SKIP]] == ["NOTES.txt"]
    assert groups[Label.SKIP][0].identifier is None


@pytest.mark.parametrize("keep_contents", ["", "1\n", "1\n2\n3\n17\n"])
@pytest.mark.parametrize("name", ["NOTES.txt", "IMG_0001.png", "img_0001.jpg", "IMG_0001.jpg.bak"])
def test_non_matching_files_are_always_skipped(tmp_path: Path, name: str, keep_contents: str) -> None:
    classifier = Classifier(CONFIG, KeepSet.parse(keep_contents))

    result = classifier.classify(tmp_path / name, tmp_path)

    assert result.label is Label.SKIP


def test_relative_path_is_kept(tmp_path: Path) -> None:
    classifier = Classifier(CONFIG, KeepSet.parse("1\n"))

    result = classifier.classify(tmp_path / "day1" / "IMG_0002.jpg", tmp_path)

    assert result.relative_path == Path("day1") / "IMG_0002.jpg"
    assert result.identifier == "2"
    assert result.label is Label.ACT


def test_classification_is_independent_of_order(tmp_path: Path) -> None:
    paths = [tmp_path / "IMG_0002.jpg", tmp_path / "IMG_0001.jpg"]
    classifier = Classifier(CONFIG, KeepSet.parse("1\n"))

    forward = classifier.classify_all(paths, tmp_path)
    backward = classifier.classify_all(list(reversed(paths)), tmp_path)

    assert {item.path: item.label for item in forward} == {item.path: item.label for item in backward}
