"""
Phrase table schema and the built-in symptom catalog.
"""

from typing import List, Tuple

from pydantic import BaseModel, model_validator


class IntentData(BaseModel):
    questions: List[str]
    answers: List[str]

    @model_validator(mode="after")
    def _check_pairs(self):
        if len(self.questions) != len(self.answers):
            raise ValueError(
                f"questions ({len(self.questions)}) and answers "
                f"({len(self.answers)}) must have the same length"
            )
        return self

    def entries(self) -> List[Tuple[str, str]]:
        """Ordered (question, answer) pairs."""
        return list(zip(self.questions, self.answers))


DEFAULT_INTENTS = IntentData(
    questions=[
        "Mouth Bitter",
        "Headache",
        "Cough and Sore Throat",
        "Fever and Body Aches",
        "Shortness of Breath",
        "Abdominal Pain and Diarrhea",
        "Joint Pain and Swelling",
        "Fatigue and Weakness",
        "Hello",
    ],
    answers=[
        "You might have Malaria",
        "It could be due to stress or a tension headache",
        "You may be suffering from a common cold or flu",
        "It could be a sign of influenza or dengue fever",
        "It could indicate a respiratory infection or asthma",
        "You may have food poisoning or a stomach virus",
        "It could be a symptom of arthritis or rheumatoid arthritis",
        "It may be due to lack of sleep or anemia",
        "Hi, How may I help you",
    ],
)
