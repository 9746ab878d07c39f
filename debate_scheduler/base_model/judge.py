from dataclasses import dataclass


@dataclass(frozen=True)
class Judge:
    """Class representing a judge"""
    name: str
    school: str

    def __str__(self):
        return f"{self.name} [{self.school}]"

    def clone(self) -> "Judge":
        return Judge(name=self.name, school=self.school)
