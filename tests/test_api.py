from __future__ import annotations
from json import loads

import pytest
import requests

from playlist_addtime.api import PlaylistApiClient
from playlist_addtime.errors import ApiError
from fakes import FakeResponse, FakeSession, playlist_payload, song_detail_route


def make_client(routes) -> tuple[PlaylistApiClient, FakeSession]:
    session = FakeSession(routes)
    return PlaylistApiClient("http://api.test/", session=session), session


def test_get_playlist_detail_parses_entries_in_api_order():
    client, session = make_client(
        {"/playlist/detail": lambda p: FakeResponse(playlist_payload([{"id": 2, "at": 5}, {"id": 1, "at": 9}]))}
    )
    ref, entries = client.get_playlist_detail("3778678")
    assert ref.name == "Test Playlist"
    assert ref.creator_name == "tester"
    assert [e.song_id for e in entries] == [2, 1]
    assert [e.add_timestamp for e in entries] == [5, 9]
    assert session.calls == [("/playlist/detail", {"id": "3778678"})]


def test_non_success_code_includes_upstream_message():
    client, _ = make_client(
        {"/playlist/detail": lambda p: FakeResponse({"code": 401, "message": "需要登录"})}
    )
    with pytest.raises(ApiError) as exc:
        client.get_playlist_detail("1")
    assert "failed to fetch playlist detail" in str(exc.value)
    assert "需要登录" in str(exc.value)


def test_non_success_code_without_message():
    client, _ = make_client({"/playlist/detail": lambda p: FakeResponse({"code": 404})})
    with pytest.raises(ApiError, match="unknown error"):
        client.get_playlist_detail("1")


def test_transport_failure_is_wrapped():
    def boom(params):
        raise requests.ConnectionError("connection refused")

    client, _ = make_client({"/playlist/detail": boom})
    with pytest.raises(ApiError, match="failed to fetch playlist detail: connection refused"):
        client.get_playlist_detail("1")


def test_http_error_status_is_wrapped():
    client, _ = make_client({"/song/detail": lambda p: FakeResponse({}, status_code=502)})
    with pytest.raises(ApiError, match="failed to resolve song details"):
        client.get_song_details([1])


def test_malformed_playlist_is_api_error():
    client, _ = make_client(
        {"/playlist/detail": lambda p: FakeResponse({"code": 200, "playlist": {"name": "no id"}})}
    )
    with pytest.raises(ApiError, match="malformed response"):
        client.get_playlist_detail("1")


def test_non_json_body_is_api_error():
    client, _ = make_client({"/song/detail": lambda p: FakeResponse(ValueError("not json"))})
    with pytest.raises(ApiError, match="failed to resolve song details"):
        client.get_song_details([1])


def test_song_details_sends_csv_and_descriptor_list():
    client, session = make_client({"/song/detail": song_detail_route(known={10, 30})})
    songs = client.get_song_details([10, 20, 30])
    assert [s.id for s in songs] == [10, 30]
    path, params = session.calls[0]
    assert path == "/song/detail"
    assert params["ids"] == "10,20,30"
    assert loads(params["c"]) == [{"id": 10}, {"id": 20}, {"id": 30}]


def test_context_manager_closes_session():
    session = FakeSession({})
    with PlaylistApiClient(session=session):
        pass
    assert session.closed


def test_requests_json_decode_error_is_malformed_response():
    bad_json = requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
    client, _ = make_client({"/playlist/detail": lambda p: FakeResponse(bad_json)})
    with pytest.raises(ApiError, match="failed to fetch playlist detail: malformed response"):
        client.get_playlist_detail("1")


def test_http_error_keeps_upstream_message():
    client, _ = make_client(
        {"/playlist/detail": lambda p: FakeResponse({"code": 401, "message": "需要登录"}, status_code=401)}
    )
    with pytest.raises(ApiError) as exc:
        client.get_playlist_detail("1")
    assert "401" in str(exc.value)
    assert "需要登录" in str(exc.value)


def test_non_numeric_create_time_is_malformed_response():
    client, _ = make_client(
        {"/playlist/detail": lambda p: FakeResponse(playlist_payload([], createTime="2020-01-01"))}
    )
    with pytest.raises(ApiError, match="malformed response"):
        client.get_playlist_detail("1")
