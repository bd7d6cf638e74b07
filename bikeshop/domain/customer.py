from dataclasses import dataclass


@dataclass
class Customer:
    name: str
    address: str

    def greeting(self) -> str:
        return f"Hello {self.name}!"
