from __future__ import annotations

from .models import Gender, Workload

GENDERS: tuple[Gender, ...] = (Gender.MALE, Gender.FEMALE)
WORKLOADS: tuple[Workload, ...] = (Workload.TEN, Workload.TWENTY, Workload.THIRTY, Workload.FORTY)

NAMES_BY_GENDER: dict[Gender, tuple[str, ...]] = {
    Gender.MALE: (
        "Jan", "Petr", "Jakub", "Michal", "Ondřej",
        "David", "Tomáš", "Filip", "Martin", "Lukáš",
        "Marek", "Karel", "Václav", "Roman", "Adam", "Matěj",
    ),
    Gender.FEMALE: (
        "Lucie", "Marie", "Anna", "Tereza", "Eva",
        "Kateřina", "Barbora", "Veronika", "Adéla",
        "Kristýna", "Karolína", "Marcela", "Hana",
        "Zuzana", "Jana", "Nikola",
    ),
}
SURNAMES_BY_GENDER: dict[Gender, tuple[str, ...]] = {
    Gender.MALE: (
        "Novák", "Svoboda", "Novotný", "Dvořák", "Černý",
        "Procházka", "Kučera", "Veselý", "Horák", "Němec",
        "Marek", "Pokorný", "Pavlík", "Sýkora", "Král", "Růžička",
    ),
    Gender.FEMALE: (
        "Nováková", "Svobodová", "Novotná", "Dvořáková", "Černá",
        "Procházková", "Kučerová", "Veselá", "Horáková", "Němcová",
        "Marková", "Pokorná", "Pavlíková", "Sýkorová", "Králová", "Růžičková",
    ),
}
