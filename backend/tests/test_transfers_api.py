"""
Tests for the transfer workflow endpoints.
"""
from fastapi import status

from bedboard.api import transfers

WA_102_1 = "F3-WARD-A-WA-102-1"
WB_203_1 = "F3-WARD-B-WB-203-1"


def _action(client, board_id, step):
    return client.post(f"/api/sessions/{board_id}/transfer/actions", json={"step": step})


def _select_priya(client, board_id):
    return _action(client, board_id, {"action": "select_patient", "patient_id": "MRN0100002"})


class TestTransferModal:
    """Tests for opening, searching and cancelling."""

    def test_open_with_destination(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/beds/{WA_102_1}/click")

        response = client.post(f"/api/sessions/{board_id}/transfer/open")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["state"] == "searching_patient"
        assert body["destination"]["bed_number"] == "WA-102-1"
        assert not body["destination_restricted"]
        assert len(body["patients"]) == 12
        assert body["scheduled_at"] == "2026-03-10T09:30:00"

    def test_several_beds_restrict_destination(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/beds/{WB_203_1}/click")
        client.post(f"/api/sessions/{board_id}/beds/{WA_102_1}/click")

        body = client.post(f"/api/sessions/{board_id}/transfer/open").json()

        assert body["destination"]["bed_number"] == "WB-203-1"
        assert body["destination_restricted"]

    def test_search_patients(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/transfer/open")

        response = client.get(f"/api/sessions/{board_id}/transfer/patients", params={"q": "priya"})

        assert response.status_code == status.HTTP_200_OK
        assert [p["name"] for p in response.json()] == ["Priya Sharma"]
        assert client.get(f"/api/sessions/{board_id}/transfer").json()["search"] == "priya"

    def test_search_needs_open_modal(self, client, board_id):
        response = client.get(f"/api/sessions/{board_id}/transfer/patients", params={"q": "priya"})
        assert response.status_code == status.HTTP_409_CONFLICT

    def test_cancel(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/transfer/open")
        _select_priya(client, board_id)

        response = client.post(f"/api/sessions/{board_id}/transfer/cancel")

        assert response.json()["state"] == "closed"
        assert response.json()["patient"] is None

    def test_reopen_is_clean(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/transfer/open")
        _select_priya(client, board_id)
        _action(client, board_id, {"action": "set_notes", "notes": "Wheelchair"})

        body = client.post(f"/api/sessions/{board_id}/transfer/open").json()

        assert body["patient"] is None
        assert body["notes"] == ""


class TestTransferActions:
    """Tests for the step actions."""

    def test_select_patient(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/transfer/open")

        response = _select_priya(client, board_id)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["patient"]["name"] == "Priya Sharma"
        assert response.json()["state"] == "patient_selected"

    def test_malformed_mrn(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/transfer/open")

        response = _action(client, board_id, {"action": "select_patient", "patient_id": "P-2"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_mrn(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/transfer/open")

        response = _action(client, board_id, {"action": "select_patient", "patient_id": "MRN9999999"})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unknown_action(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/transfer/open")

        response = _action(client, board_id, {"action": "teleport"})
        assert response.status_code == 422

    def test_schedule_in_past(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/transfer/open")

        response = _action(client, board_id, {
            "action": "set_schedule",
            "scheduled_at": "2026-03-09T10:00:00",
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Transfer date cannot be in the past"

    def test_action_on_closed_modal(self, client, board_id):
        response = _select_priya(client, board_id)
        assert response.status_code == status.HTTP_409_CONFLICT


class TestTransferConfirm:
    """Tests for confirming a transfer."""

    def test_missing_destination(self, client, board_id):
        """Priya Sharma with no bed selected is rejected on the bed."""
        client.post(f"/api/sessions/{board_id}/transfer/open")
        _select_priya(client, board_id)

        response = client.post(f"/api/sessions/{board_id}/transfer/confirm")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "No destination bed selected"
        assert client.get(f"/api/sessions/{board_id}/transfer").json()["is_open"]

    def test_missing_patient(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/transfer/open")

        response = client.post(f"/api/sessions/{board_id}/transfer/confirm")
        assert response.json()["detail"] == "Please select a patient"

    def test_confirm_when_closed(self, client, board_id):
        response = client.post(f"/api/sessions/{board_id}/transfer/confirm")
        assert response.status_code == status.HTTP_409_CONFLICT

    def test_successful_transfer(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/beds/{WA_102_1}/click")
        client.post(f"/api/sessions/{board_id}/transfer/open")
        _select_priya(client, board_id)
        _action(client, board_id, {"action": "set_reason", "reason": "step_down_care"})

        response = client.post(f"/api/sessions/{board_id}/transfer/confirm")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["message"] == "Transfer initiated for Priya Sharma to WA-102-1"
        assert body["data"]["reason"] == "step_down_care"
        assert body["data"]["destination"]["id"] == WA_102_1

        board = client.get(f"/api/sessions/{board_id}").json()
        assert board["selected_bed_ids"] == []
        assert board["transfer"]["state"] == "submitted"

    def test_failed_confirm_notifies(self, client, board_id):
        client.post(f"/api/sessions/{board_id}/transfer/open")

        with client.websocket_connect("/api/ws") as websocket:
            websocket.send_json({"action": "subscribe", "session_id": board_id})
            websocket.receive_json()

            client.post(f"/api/sessions/{board_id}/transfer/confirm")

            message = websocket.receive_json()
            assert message["kind"] == "error"
            assert message["message"] == "Please select a patient"

    def test_form_changed_during_delay(self, client, board_id, ctx, monkeypatch):
        """A form edited while the confirm waits is rejected with an error toast."""
        board = ctx.sessions.get(board_id)
        client.post(f"/api/sessions/{board_id}/beds/{WA_102_1}/click")
        client.post(f"/api/sessions/{board_id}/transfer/open")
        _select_priya(client, board_id)
        _action(client, board_id, {"action": "set_reason", "reason": "procedure"})

        submit = board.confirm_transfer

        def edit_then_submit():
            board.transfer.change_patient()
            return submit()

        sent = []

        async def record_notify(kind, message, session_id=None, **extra):
            sent.append((kind, message))

        monkeypatch.setattr(board, "confirm_transfer", edit_then_submit)
        monkeypatch.setattr(transfers.manager, "notify", record_notify)

        response = client.post(f"/api/sessions/{board_id}/transfer/confirm")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Please select a patient"
        assert sent == [("error", "Please select a patient")]
        assert board.selection.ids == [WA_102_1]
