"""Premade ElevenLabs voices."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StaticVoice:
    """A premade voice offered by the service.

    Args:
        voice_id: Identifier used in the request path
        name: Human-readable name of the voice
        gender: "female" or "male"
    """

    voice_id: str
    name: str
    gender: str

    @property
    def id(self) -> str:
        return self.voice_id


RACHEL = StaticVoice("21m00Tcm4TlvDq8ikWAM", "Rachel", "female")
DREW = StaticVoice("29vD33N1CtxCmqQRPOHJ", "Drew", "male")
CLYDE = StaticVoice("2EiwWnXFnvU5JabPnv8n", "Clyde", "male")
PAUL = StaticVoice("5Q0t7uMcjvnagumLfvZi", "Paul", "male")
DOMI = StaticVoice("AZnzlk1XvdvUeBnXmlld", "Domi", "female")
DAVE = StaticVoice("CYw3kZ02Hs0563khs1Fj", "Dave", "male")
FIN = StaticVoice("D38z5RcWu1voky8WS1ja", "Fin", "male")
SARAH = StaticVoice("EXAVITQu4vr4xnSDxMaL", "Sarah", "female")
ANTONI = StaticVoice("ErXwobaYiN019PkySvjV", "Antoni", "male")
THOMAS = StaticVoice("GBv7mTt0atIp3Br8iCZE", "Thomas", "male")
CHARLIE = StaticVoice("IKne3meq5aSn9XLyUdCD", "Charlie", "male")
GEORGE = StaticVoice("JBFqnCBsd6RMkjVDRZzb", "George", "male")
EMILY = StaticVoice("LcfcDJNUP1GQjkzn1xUU", "Emily", "female")
ELLI = StaticVoice("MF3mGyEYCl7XYWbV9V6O", "Elli", "female")
CALLUM = StaticVoice("N2lVS1w4EtoT3dr4eOWO", "Callum", "male")
PATRICK = StaticVoice("ODq5zmih8GrVes37Dizd", "Patrick", "male")
HARRY = StaticVoice("SOYHLrjzK2X1ezoPC6cr", "Harry", "male")
LIAM = StaticVoice("TX3LPaxmHKxFdv7VOQHJ", "Liam", "male")
DOROTHY = StaticVoice("ThT5KcBeYPX3keUQqHPh", "Dorothy", "female")
JOSH = StaticVoice("TxGEqnHWrfWFTfGW9XjX", "Josh", "male")
ARNOLD = StaticVoice("VR6AewLTigWG4xSOukaG", "Arnold", "male")
CHARLOTTE = StaticVoice("XB0fDUnXU5powFXDhCwa", "Charlotte", "female")
ALICE = StaticVoice("Xb7hH8MSUJpSbSDYk0k2", "Alice", "female")
MATILDA = StaticVoice("XrExE9yKIg1WjnnlVkGX", "Matilda", "female")
JAMES = StaticVoice("ZQe5CZNOzWyzPSCn5a3c", "James", "male")
JOSEPH = StaticVoice("Zlb1dXrM653N07WRdFW3", "Joseph", "male")
JEREMY = StaticVoice("bVMeCyTHy58xNoL34h3p", "Jeremy", "male")
MICHAEL = StaticVoice("flq6f7yk4E4fJM5XTYuZ", "Michael", "male")
ETHAN = StaticVoice("g5CIjZEefAph4nQFvHAz", "Ethan", "male")
CHRIS = StaticVoice("iP95p4xoKVk53GoZ742B", "Chris", "male")
GIGI = StaticVoice("jBpfuIE2acCO8z3wKNLl", "Gigi", "female")
FREYA = StaticVoice("jsCqWAovK2LkecY7zXl4", "Freya", "female")
BRIAN = StaticVoice("nPczCjzI2devNBz1zQrb", "Brian", "male")
GRACE = StaticVoice("oWAxZDx7w5VEj9dCyTzz", "Grace", "female")
DANIEL = StaticVoice("onwK4e9ZLuTAKqWW03F9", "Daniel", "male")
LILY = StaticVoice("pFZP5JQG7iQjIQuC4Bku", "Lily", "female")
SERENA = StaticVoice("pMsXgVXv3BLzUgSXRplE", "Serena", "female")
ADAM = StaticVoice("pNInz6obpgDQGcFmaJgB", "Adam", "male")
NICOLE = StaticVoice("piTKgcLEGmPE4e6mEKli", "Nicole", "female")
BILL = StaticVoice("pqHfZKP75CvOlQylNhV4", "Bill", "male")
JESSIE = StaticVoice("t0jbNlBVZ17f02VDIeMI", "Jessie", "male")
SAM = StaticVoice("yoZ06aMxZJJ28mfd3POQ", "Sam", "male")
GLINDA = StaticVoice("z9fAnlkpzviPz146aGWa", "Glinda", "female")
GIOVANNI = StaticVoice("zcAOhNBS3c14rBihAFp1", "Giovanni", "male")
MIMI = StaticVoice("zrHiDhphv9ZnVXBqCLjz", "Mimi", "female")

ALL_VOICES: tuple[StaticVoice, ...] = (
    RACHEL,
    DREW,
    CLYDE,
    PAUL,
    DOMI,
    DAVE,
    FIN,
    SARAH,
    ANTONI,
    THOMAS,
    CHARLIE,
    GEORGE,
    EMILY,
    ELLI,
    CALLUM,
    PATRICK,
    HARRY,
    LIAM,
    DOROTHY,
    JOSH,
    ARNOLD,
    CHARLOTTE,
    ALICE,
    MATILDA,
    JAMES,
    JOSEPH,
    JEREMY,
    MICHAEL,
    ETHAN,
    CHRIS,
    GIGI,
    FREYA,
    BRIAN,
    GRACE,
    DANIEL,
    LILY,
    SERENA,
    ADAM,
    NICOLE,
    BILL,
    JESSIE,
    SAM,
    GLINDA,
    GIOVANNI,
    MIMI,
)

_BY_NAME = {voice.name.lower(): voice for voice in ALL_VOICES}


def get_voice(name: str) -> StaticVoice | None:
    """Look up a premade voice by display name (case-insensitive).

    Returns None when the name is not in the catalog.
    """
    return _BY_NAME.get(name.strip().lower())
