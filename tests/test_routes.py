"""End-to-end API tests with test-double adapters."""

import base64

from travel_assistant.domain.models import StoredAudio
from travel_assistant.exceptions import (
    ConversationError,
    SynthesisError,
    SynthesisFailure,
    TranscriptionError,
    TranscriptionFailure,
)

from conftest import reply

SPEECH = ("speech.webm", b"\x1aE\xdf\xa3" + b"\x00" * 64, "audio/webm")
AUDIO_FORM = {"chatflowId": "translate-flow", "sourceLanguage": "en", "targetLanguage": "es"}


class TestAudioTranslateSpeak:
    def test_full_pipeline(self, client):
        response = client.post(
            "/api/translation/audio-translate-speak", data=AUDIO_FORM, files={"audio": SPEECH}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert "warnings" not in body
        data = body["data"]
        assert data["originalText"] == "Hello, how are you?"
        assert data["translatedText"] == "Hola, ¿cómo estás?"
        assert data["audio"]["format"] == "mp3"
        assert data["audio"]["size"] == 12345
        assert len(base64.b64decode(data["audio"]["content"])) == 12345

    def test_quota_exceeded_still_returns_translation(self, client, synthesizer):
        synthesizer.synthesize.side_effect = SynthesisError(
            SynthesisFailure.QUOTA_EXCEEDED, "Text-to-Speech API quota exceeded"
        )

        response = client.post(
            "/api/translation/audio-translate-speak", data=AUDIO_FORM, files={"audio": SPEECH}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["translatedText"] == "Hola, ¿cómo estás?"
        assert "audio" not in body["data"]
        assert body["warnings"] == ["Text-to-speech failed: Text-to-Speech API quota exceeded"]

    def test_recognition_failure(self, client, recognizer, conversation):
        recognizer.transcribe.side_effect = TranscriptionError(
            TranscriptionFailure.EMPTY_TRANSCRIPT, "No transcription result from Google STT"
        )

        response = client.post(
            "/api/translation/audio-translate-speak", data=AUDIO_FORM, files={"audio": SPEECH}
        )

        assert response.status_code == 502
        assert response.json() == {
            "success": False,
            "error": "EmptyTranscript",
            "message": "No transcription result from Google STT",
        }
        conversation.send_message.assert_not_called()

    def test_missing_chatflow(self, client, recognizer):
        response = client.post(
            "/api/translation/audio-translate-speak",
            data={"targetLanguage": "es"},
            files={"audio": SPEECH},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "MissingInput"
        recognizer.transcribe.assert_not_called()

    def test_recognition_languages_from_form(self, client, recognizer):
        client.post(
            "/api/translation/audio-translate-speak",
            data={
                **AUDIO_FORM,
                "languageCode": "es-ES",
                "alternativeLanguageCodes": "en-US, fr-FR",
            },
            files={"audio": SPEECH},
        )

        kwargs = recognizer.transcribe.call_args.kwargs
        assert kwargs["language_code"] == "es-ES"
        assert kwargs["alternative_language_codes"] == ("en-US", "fr-FR")


class TestTextTranslation:
    def test_translate_text(self, client, conversation, synthesizer):
        response = client.post(
            "/api/translation/text",
            json={
                "message": "Hello, how are you?",
                "chatflowId": "translate-flow",
                "targetLanguage": "es",
                "history": [{"message": "Hi", "type": "user"}],
            },
        )

        assert response.status_code == 200
        assert response.json()["data"]["translatedText"] == "Hola, ¿cómo estás?"
        history = conversation.send_message.call_args.kwargs["history"]
        assert history[0].role == "userMessage"
        synthesizer.synthesize.assert_not_called()

    def test_translation_failure_keeps_status(self, client, conversation):
        conversation.send_message.side_effect = ConversationError(
            "Chatflow not found", status_code=404
        )

        response = client.post(
            "/api/translation/text", json={"message": "Hello", "chatflowId": "missing"}
        )

        assert response.status_code == 404
        assert response.json()["error"] == "TranslationFailed"

    def test_translate_and_speak(self, client, synthesizer):
        response = client.post(
            "/api/translation/translate-and-speak",
            json={"message": "Hello", "chatflowId": "translate-flow", "targetLanguage": "es"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["audio"]["voiceName"] == "es-ES-Wavenet-B"
        options = synthesizer.synthesize.call_args.args[1]
        assert options.language_code == "es-ES"


class TestTextToSpeech:
    def test_returns_raw_audio(self, client):
        response = client.post("/api/translation/text-to-speech", json={"text": "Hola"})

        assert response.status_code == 200
        assert response.headers["content-type"] == "audio/mpeg"
        assert response.headers["x-voice-name"] == "es-ES-Wavenet-B"
        assert len(response.content) == 12345

    def test_save_to_file(self, client, storage):
        storage.save.return_value = StoredAudio(
            file_path="audio-output/abc.mp3", filename="abc.mp3", size=12345
        )

        response = client.post(
            "/api/translation/text-to-speech",
            json={"text": "Hola", "saveToFile": True, "returnAudio": False},
        )

        body = response.json()
        assert body["data"]["file"]["fileName"] == "abc.mp3"
        assert "content" not in body["data"]["audio"]
        storage.save.assert_called_once()

    def test_unconfigured_synthesis(self, client, synthesizer):
        synthesizer.synthesize.side_effect = SynthesisError(
            SynthesisFailure.SERVICE_UNAVAILABLE, "credentials not configured"
        )

        response = client.post("/api/translation/text-to-speech", json={"text": "Hola"})

        assert response.status_code == 503
        assert response.json()["error"] == "ServiceUnavailable"

    def test_speaking_rate_out_of_range(self, client, synthesizer):
        response = client.post(
            "/api/translation/text-to-speech", json={"text": "Hola", "speakingRate": 5}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Validation error"
        synthesizer.synthesize.assert_not_called()


class TestImageTranslation:
    def test_image_translation(self, client, conversation):
        conversation.send_image.return_value = reply(
            'Result: {"originalText": "出口", "translatedText": "Exit", "detectedLanguage": "zh"}'
        )

        response = client.post(
            "/api/translation/image",
            data={"chatflowId": "vision-flow", "targetLanguage": "en"},
            files={"image": ("sign.png", b"\x89PNG\r\n", "image/png")},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["originalText"] == "出口"
        assert data["translatedText"] == "Exit"
        assert data["detectedLanguage"] == "zh"

    def test_unsupported_image_type(self, client):
        response = client.post(
            "/api/translation/image",
            data={"chatflowId": "vision-flow"},
            files={"image": ("doc.pdf", b"%PDF", "application/pdf")},
        )

        assert response.status_code == 400


class TestCatalogs:
    def test_languages(self, client):
        languages = client.get("/api/translation/languages").json()["data"]
        codes = [language["code"] for language in languages]
        assert "es" in codes
        assert "auto" in codes

    def test_tts_languages(self, client):
        data = client.get("/api/translation/tts-languages").json()["data"]
        chinese = next(language for language in data if language["code"] == "zh")
        assert chinese["languageCode"] == "cmn-CN"

    def test_voices(self, client, synthesizer):
        synthesizer.list_voices.return_value = [{"name": "es-ES-Standard-A"}]

        response = client.get("/api/translation/voices", params={"languageCode": "es-ES"})

        assert response.json()["data"]["count"] == 1
        synthesizer.list_voices.assert_called_once_with("es-ES")

    def test_chatflows(self, client, conversation):
        conversation.list_chatflows.return_value = [{"id": "flow-1"}]

        response = client.get("/api/translation/chatflows")

        assert response.json()["data"]["chatflows"] == [{"id": "flow-1"}]


class TestRecommendationsRoutes:
    def test_personalized_maps_roles(self, client, conversation):
        response = client.post(
            "/api/recommendations/personalized",
            json={
                "userMessage": "Where should I eat?",
                "chatflowId": "rec-flow",
                "chatHistory": [
                    {"role": "user", "text": "I am vegetarian"},
                    {"role": "ai", "content": "Noted!"},
                ],
            },
        )

        assert response.status_code == 200
        roles = [turn.role for turn in conversation.send_message.call_args.kwargs["history"]]
        assert roles == ["userMessage", "apiMessage"]

    def test_interests(self, client):
        data = client.get("/api/recommendations/interests").json()["data"]
        assert "budgetLevels" in data

    def test_health_failure(self, client, conversation):
        conversation.ping.side_effect = ConversationError("down", status_code=502)

        assert client.get("/api/recommendations/health").status_code == 503


class TestScamPreventionRoutes:
    def test_price_advice_requires_chatflow(self, client, conversation):
        response = client.post(
            "/api/scam-prevention/price-advice", json={"item": "Scarf", "price": 40}
        )

        assert response.status_code == 400
        conversation.send_message.assert_not_called()

    def test_detect(self, client):
        response = client.post(
            "/api/scam-prevention/detect",
            json={
                "situation": "A man says my hotel is closed and offers another one.",
                "chatflowId": "price-flow",
                "urgency": "high",
            },
        )

        assert response.status_code == 200
        assert response.json()["data"]["urgency"] == "high"

    def test_situation_too_short(self, client):
        response = client.post(
            "/api/scam-prevention/detect", json={"situation": "help", "chatflowId": "flow"}
        )

        assert response.status_code == 400


class TestCurrencyRoutes:
    def test_convert(self, client, conversation):
        conversation.send_message.return_value = reply("100 USD = 92.50 EUR")

        response = client.post(
            "/api/currency/convert",
            json={"amount": 100, "fromCurrency": "USD", "toCurrency": "EUR"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["parsedResponse"]["convertedAmount"] == 92.5

    def test_negative_amount(self, client):
        response = client.post(
            "/api/currency/convert",
            json={"amount": -5, "fromCurrency": "USD", "toCurrency": "EUR"},
        )

        body = response.json()
        assert response.status_code == 400
        assert body["success"] is False
        assert body["error"] == "Validation error"
        assert body["details"]

    def test_same_currency(self, client):
        response = client.post(
            "/api/currency/convert",
            json={"amount": 5, "fromCurrency": "USD", "toCurrency": "USD"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Validation error"

    def test_supported(self, client):
        data = client.get("/api/currency/supported").json()["data"]
        assert data["count"] == 50
        assert "EUR" in data["currencies"]


class TestTransportationRoutes:
    def test_options_filtered_by_mode(self, client):
        response = client.post(
            "/api/transportation/options",
            json={"from": "Central Station", "to": "Airport", "mode": "metro"},
        )

        options = response.json()["data"]["options"]
        assert [option["type"] for option in options] == ["metro"]

    def test_nearby(self, client):
        response = client.get(
            "/api/transportation/nearby",
            params={"latitude": 40.7, "longitude": -74.0, "transportType": "bus"},
        )

        data = response.json()["data"]
        assert [option["type"] for option in data["nearbyOptions"]] == ["bus"]
        assert data["location"]["radius"] == 1000

    def test_nearby_rejects_bad_latitude(self, client):
        response = client.get(
            "/api/transportation/nearby", params={"latitude": 120, "longitude": 0}
        )

        assert response.status_code == 400

    def test_location_nearby(self, client):
        response = client.get(
            "/api/transportation/location/nearby",
            params={"latitude": "40.7", "longitude": "-74.0", "radius": "500"},
        )

        data = response.json()["data"]
        assert response.status_code == 200
        assert [option["type"] for option in data["nearbyOptions"]] == ["bus", "metro"]
        assert data["location"]["radius"] == 500

    def test_track_location(self, client):
        response = client.post(
            "/api/transportation/location/track",
            json={
                "latitude": 48.85,
                "longitude": 2.35,
                "accuracy": 25,
                "timestamp": "2026-10-19T08:30:00+00:00",
            },
        )

        data = response.json()["data"]
        assert response.status_code == 200
        assert data["location"] == {
            "latitude": 48.85,
            "longitude": 2.35,
            "accuracy": 25,
            "timestamp": "2026-10-19T08:30:00+00:00",
        }
        assert {station["type"] for station in data["nearbyStations"]} == {"bus", "metro"}

    def test_track_location_defaults(self, client):
        response = client.post(
            "/api/transportation/location/track", json={"latitude": 0, "longitude": 0}
        )

        location = response.json()["data"]["location"]
        assert location["accuracy"] == 10
        assert location["timestamp"]

    def test_track_location_rejects_bad_longitude(self, client):
        response = client.post(
            "/api/transportation/location/track", json={"latitude": 0, "longitude": 200}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Validation error"

    def test_location_realtime(self, client):
        response = client.get(
            "/api/transportation/location/realtime",
            params={"latitude": 40.7, "longitude": -74.0, "transportType": "metro"},
        )

        data = response.json()["data"]
        assert [option["type"] for option in data["nearbyTransport"]] == ["metro"]
        assert data["realTimeUpdates"]["bus"] is None
        assert data["realTimeUpdates"]["metro"]["delays"] == ["Red Line: 5-10 min delay"]

    def test_status(self, client):
        data = client.get("/api/transportation/status").json()["data"]

        assert data["bus"] == "Good"
        assert data["metro"] == "Delays"
        assert data["alerts"] == ["Red Line: 5-10 min delay"]


class TestApplication:
    def test_index(self, client):
        body = client.get("/").json()
        assert body["message"] == "AI Travel Assistant API"

    def test_health(self, client):
        body = client.get("/health").json()
        assert body["success"] is True
        assert body["data"]["status"] == "healthy"

    def test_unknown_endpoint(self, client):
        response = client.get("/api/nowhere")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Endpoint not found",
            "message": "The requested endpoint /api/nowhere does not exist",
        }
