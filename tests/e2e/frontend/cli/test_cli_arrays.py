"""End-to-end tests for `sundry arrays`."""

import json

from sundry.entrypoints.cli.main import sundry

# pylint: disable=magic-value-comparison,unused-argument


def test_diff_with_key(runner, write_json):
    """diff prints added, removed and updated records as JSON."""
    old = write_json("old.json", [{"id": 1, "v": "a"}, {"id": 2, "v": "b"}])
    new = write_json("new.json", [{"id": 2, "v": "B"}, {"id": 3, "v": "c"}])

    result = runner.invoke(sundry, ["arrays", "diff", old, new, "--key", "id"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "added": [{"id": 3, "v": "c"}],
        "removed": [{"id": 1, "v": "a"}],
        "updated": [
            {"from": {"id": 2, "v": "b"}, "to": {"id": 2, "v": "B"}, "keysUpdated": ["v"]}
        ],
    }


def test_diff_reads_stdin(runner, write_json):
    """'-' reads a snapshot from stdin."""
    new = write_json("new.json", ["a", "c"])
    result = runner.invoke(sundry, ["arrays", "diff", "-", new], input='["a", "b"]')
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"added": ["c"], "removed": ["b"], "updated": []}


def test_diff_warns_about_missing_keys(runner, write_json):
    """Records lacking the identity key produce a warning on stderr."""
    old = write_json("old.json", [{"id": 1}, {"name": "x"}])
    new = write_json("new.json", [{"id": 1}])
    result = runner.invoke(sundry, ["arrays", "diff", old, new, "-k", "id"])
    assert result.exit_code == 0
    assert "1 record(s) have no 'id' field" in result.stderr
    assert json.loads(result.stdout)["removed"] == [{"name": "x"}]


def test_diff_rejects_non_arrays(runner, write_json):
    """A JSON document that is not an array is a usage error."""
    old = write_json("old.json", {"id": 1})
    new = write_json("new.json", [])
    result = runner.invoke(sundry, ["arrays", "diff", old, new])
    assert result.exit_code == 2
    assert "expected a JSON array" in result.output


def test_diff_rejects_invalid_json(runner, write_json):
    """Malformed JSON is a usage error."""
    new = write_json("new.json", [])
    result = runner.invoke(sundry, ["arrays", "diff", "-", new], input="[1,")
    assert result.exit_code == 2
    assert "not valid JSON" in result.output


def test_unique(runner, write_json):
    """unique keeps the last record per key value."""
    path = write_json("items.json", [{"k": 1, "v": "a"}, {"k": 2}, {"k": 1, "v": "b"}])
    result = runner.invoke(sundry, ["arrays", "unique", path, "--key", "k"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"k": 1, "v": "b"}, {"k": 2}]


def test_unique_with_list_values(runner, write_json):
    """Array-valued keys are deduplicated by content."""
    path = write_json("items.json", [{"k": [1], "v": "a"}, {"k": [1], "v": "b"}])
    result = runner.invoke(sundry, ["arrays", "unique", path, "--key", "k"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [{"k": [1], "v": "b"}]


def test_sort(runner, write_json):
    """sort orders by key with null values last, in either direction."""
    path = write_json("items.json", [{"n": "b"}, {"n": None}, {"n": "a"}])

    ascending = runner.invoke(sundry, ["arrays", "sort", path, "--key", "n"])
    descending = runner.invoke(sundry, ["arrays", "sort", path, "-k", "n", "--descending"])

    assert json.loads(ascending.stdout) == [{"n": "a"}, {"n": "b"}, {"n": None}]
    assert json.loads(descending.stdout) == [{"n": "b"}, {"n": "a"}, {"n": None}]
