from sorting_visualizer.app import RUNS


def _start(client, **form):
    data = {"algorithm": "bubble", "custom": "5 3 4 1", "speed": "0.5"}
    data.update(form)
    return client.post("/start", data=data)


class TestPages:
    def test_index_lists_algorithms(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        for name in ("Bubble Sort", "Merge Sort", "Radix Sort"):
            assert name in resp.get_data(as_text=True)

    def test_view_without_run_redirects_home(self, client):
        resp = client.get("/view")
        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/")


class TestStart:
    def test_custom_array_creates_run(self, client):
        resp = _start(client)
        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/view")

        (run,) = RUNS.values()
        assert run["algo"] == "bubble"
        assert run["size"] == 4
        assert run["playback"].speed == 0.5

        page = client.get("/view").get_data(as_text=True)
        assert "Starting Bubble Sort" in page
        assert page.count('class="bar ') == 4

    def test_random_array_size_is_clamped(self, client, app):
        _start(client, custom="", size="100000")
        (run,) = RUNS.values()
        assert run["size"] == app.config["MAX_SIZE"]

    def test_bad_numbers_fall_back_to_defaults(self, client, app):
        _start(client, custom="", size="lots", speed="fast")
        (run,) = RUNS.values()
        assert run["size"] == app.config["DEFAULT_SIZE"]
        assert run["playback"].speed == app.config["DEFAULT_SPEED"]

    def test_unknown_algorithm_falls_back_to_default(self, client, app):
        _start(client, algorithm="bogo")
        (run,) = RUNS.values()
        assert run["algo"] == app.config["DEFAULT_ALGORITHM"]

    def test_new_run_discards_previous_trace(self, client):
        _start(client)
        (first_id,) = RUNS
        _start(client, algorithm="quick")

        assert len(RUNS) == 1
        assert first_id not in RUNS
        (run,) = RUNS.values()
        assert run["algo"] == "quick"

    def test_invalid_custom_array_flashes_error(self, client):
        resp = _start(client, custom="42")
        assert resp.headers["Location"].endswith("/")
        assert not RUNS
        page = client.get("/").get_data(as_text=True)
        assert "Please enter at least 2 numbers" in page


class TestAdvance:
    def test_step_forward_and_back(self, client):
        _start(client)
        client.post("/advance", data={"dir": "next"})
        page = client.get("/view").get_data(as_text=True)
        assert "Comparing elements at positions 0 and 1" in page

        client.post("/advance", data={"dir": "prev"})
        assert "Starting Bubble Sort" in client.get("/view").get_data(as_text=True)

    def test_skip_to_end(self, client):
        _start(client)
        client.post("/advance", data={"dir": "last"})
        page = client.get("/view").get_data(as_text=True)
        assert "Bubble Sort completed!" in page
        assert page.count('class="bar sorted"') == 4

    def test_meta_refresh_advances_by_get(self, client):
        _start(client, autoplay="on")
        page = client.get("/view").get_data(as_text=True)
        assert 'http-equiv="refresh"' in page

        client.get("/advance?dir=next")
        (run,) = RUNS.values()
        assert run["playback"].index == 1

    def test_unknown_direction_is_ignored(self, client):
        _start(client)
        resp = client.post("/advance", data={"dir": "sideways"})
        assert resp.status_code == 302
        (run,) = RUNS.values()
        assert run["playback"].index == 0

    def test_reset_drops_run(self, client):
        _start(client)
        client.post("/reset")
        assert not RUNS
        assert client.get("/view").status_code == 302


class TestTraceApi:
    def test_radix_trace(self, client, app, monkeypatch):
        monkeypatch.setitem(app.config, "CUSTOM_MAX_VALUE", 1000)
        resp = client.get("/api/trace?algorithm=radix&values=170,45,75,90,802,24,2,66")
        assert resp.status_code == 200

        body = resp.get_json()
        assert body["total"] == len(body["steps"])
        final = body["steps"][-1]
        assert [e["value"] for e in final["array"]] == [2, 24, 45, 66, 75, 90, 170, 802]
        assert {e["state"] for e in final["array"]} == {"sorted"}

    def test_unknown_algorithm_gives_empty_trace(self, client):
        body = client.get("/api/trace?algorithm=bogo&values=3,2,1").get_json()
        assert body == {"algorithm": "bogo", "total": 0, "steps": []}

    def test_invalid_values(self, client):
        resp = client.get("/api/trace?algorithm=quick&values=abc")
        assert resp.status_code == 400
        assert resp.get_json()["rejected"] == ["abc"]

    def test_out_of_range_values_are_rejected_not_dropped(self, client):
        resp = client.get("/api/trace?algorithm=radix&values=170,45,802,2")
        assert resp.status_code == 400

        body = resp.get_json()
        assert body["error"] == "Values must be integers from 1 to 500"
        assert body["rejected"] == ["802"]

    def test_too_few_values(self, client):
        resp = client.get("/api/trace?algorithm=quick&values=7")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Please enter at least 2 numbers"

    def test_random_values_when_none_given(self, client, app):
        body = client.get("/api/trace?algorithm=heap&size=8").get_json()
        assert len(body["steps"][0]["array"]) == max(8, app.config["MIN_SIZE"])
