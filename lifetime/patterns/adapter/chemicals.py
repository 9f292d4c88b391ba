"""Chemical compounds backed by a legacy databank."""

# name -> (formula, molecular weight, melting point, boiling point)
_DATABANK = {
    "water": ("H20", 18.015, 0.0, 100.0),
    "benzene": ("C6H6", 78.1134, 5.5, 80.1),
    "ethanol": ("C2H5OH", 46.0688, -114.1, 78.3),
}


class ChemicalDatabank:
    """The adaptee: a legacy API with its own calling conventions."""

    def get_critical_point(self, compound: str, point: str) -> float:
        """Melting point for point 'M', boiling point otherwise."""
        record = _DATABANK.get(compound.lower())
        if record is None:
            return 0.0
        return record[2] if point == "M" else record[3]

    def get_molecular_structure(self, compound: str) -> str:
        record = _DATABANK.get(compound.lower())
        return record[0] if record else ""

    def get_molecular_weight(self, compound: str) -> float:
        record = _DATABANK.get(compound.lower())
        return record[1] if record else 0.0


class Compound:
    """The target interface the client uses."""

    def __init__(self, chemical: str):
        self.chemical = chemical
        self.boiling_point = None
        self.melting_point = None
        self.molecular_weight = None
        self.molecular_formula = None

    def display(self):
        print(f"\nCompound: {self.chemical} ")


class RichCompound(Compound):
    """Adapts ChemicalDatabank to the Compound interface."""

    def __init__(self, chemical: str, bank: ChemicalDatabank = None):
        super().__init__(chemical)
        self._bank = bank or ChemicalDatabank()

    def display(self):
        self.boiling_point = self._bank.get_critical_point(self.chemical, "B")
        self.melting_point = self._bank.get_critical_point(self.chemical, "M")
        self.molecular_weight = self._bank.get_molecular_weight(self.chemical)
        self.molecular_formula = self._bank.get_molecular_structure(self.chemical)

        super().display()
        print(f"\tFormula: {self.molecular_formula}")
        print(f"\tWeight : {self.molecular_weight}")
        print(f"\tMelting Pt: {self.melting_point}")
        print(f"\tBoiling Pt: {self.boiling_point}")
