"""Curated values used by the trait editor's randomizer and defaults."""

from ..core.models import SpecimenCategory, SpecimenSize

SUPPORTED_LOCALES = ("en", "id")

CONCEPTS: dict[str, dict[SpecimenCategory, list[str]]] = {
    "en": {
        SpecimenCategory.ANIMAL: [
            "A bioluminescent wolf with peacock feathers",
            "A giant land-dwelling octopus that mimics trees",
            "A tiny elephant with translucent butterfly wings",
            "A burrowing shark that swims through sand",
            "A hovering manta ray that filters smog",
        ],
        SpecimenCategory.PLANT: [
            "A tree that grows floating glowing spores",
            "A carnivorous vine that mimics human whispers",
            "A cactus that stores liquid electricity",
            "Glass-like flowers that focus sunlight into beams",
            "Subterranean moss that pulses like a heartbeat",
        ],
        SpecimenCategory.FANTASY: [
            "A dragon made entirely of living volcanic glass",
            "A spectral stag that leaves trails of frozen time",
            "A six-winged serpent with eyes like emerald suns",
            "A floating whale that carries a forest on its back",
            "A creature formed from pure static and shadows",
        ],
        SpecimenCategory.MICROBE: [
            "Bacteria that converts radioactive waste into gold",
            "A virus that gives its host temporary telepathy",
            "Fungi that creates complex geometric structures",
            "Nano-organisms that repair cellular damage",
            "Plankton that turns seawater into drinkable nectar",
        ],
        SpecimenCategory.HYBRID: [
            "A mechanical bee with an organic honey-producing heart",
            "A jellyfish-oak tree hybrid with stinging leaves",
            "A cybernetic hawk with solar-cell plumage",
            "A coral-crustacean entity with built-in sonar",
            "A wolf fused with crystalline mineral growths",
        ],
    },
    "id": {
        SpecimenCategory.ANIMAL: [
            "Serigala bioluminescent dengan bulu merak",
            "Gurita darat raksasa yang menyerupai pohon",
            "Gajah kecil dengan sayap kupu-kupu transparan",
            "Hiu penggali yang berenang melalui pasir",
            "Pari manta melayang yang menyaring kabut asap",
        ],
        SpecimenCategory.PLANT: [
            "Pohon yang menumbuhkan spora bercahaya melayang",
            "Tanaman merambat karnivora yang meniru bisikan manusia",
            "Kaktus yang menyimpan listrik cair",
            "Bunga seperti kaca yang memfokuskan cahaya matahari menjadi sinar",
            "Lumut bawah tanah yang berdenyut seperti detak jantung",
        ],
        SpecimenCategory.FANTASY: [
            "Naga yang terbuat sepenuhnya dari kaca vulkanik hidup",
            "Rusa spektral yang meninggalkan jejak waktu beku",
            "Ular bersayap enam dengan mata seperti matahari zamrud",
            "Paus melayang yang membawa hutan di punggungnya",
            "Makhluk yang terbentuk dari statis murni dan bayangan",
        ],
        SpecimenCategory.MICROBE: [
            "Bakteri yang mengubah limbah radioaktif menjadi emas",
            "Virus yang memberikan inangnya telepati sementara",
            "Jamur yang menciptakan struktur geometris kompleks",
            "Organisme nano yang memperbaiki kerusakan sel",
            "Plankton yang mengubah air laut menjadi nektar yang bisa diminum",
        ],
        SpecimenCategory.HYBRID: [
            "Lebah mekanis dengan jantung organik penghasil madu",
            "Hibrida pohon ek-ubur-ubur dengan daun penyengat",
            "Elang sibernetik dengan bulu sel surya",
            "Entitas krustasea-karang dengan sonar bawaan",
            "Serigala yang menyatu dengan pertumbuhan mineral kristal",
        ],
    },
}

HABITATS = {
    "en": ["Floating Nebula", "Obsidian Desert", "Cybernetic Jungle", "Liquid Methane Sea", "Crystal Cathedral"],
    "id": ["Nebula Melayang", "Gurun Obsidian", "Hutan Sibernetik", "Laut Metana Cair", "Katedral Kristal"],
}

BEHAVIORS = {
    "en": ["Symbiotic", "Territorial", "Nocturnal", "Telepathic", "Hibernating"],
    "id": ["Simbiosis", "Teritorial", "Nokturnal", "Telepati", "Hibernasi"],
}

COLORS = {
    "en": ["Neon Ultraviolet", "Chrome Silver", "Abyssal Black", "Bioluminescent Cyan", "Blood Crimson"],
    "id": ["Ultraviolet Neon", "Perak Chrome", "Hitam Abyssal", "Sian Bioluminescent", "Crimson Darah"],
}

SIZES = list(SpecimenSize)

# Randomized stability is biased toward viable-looking results
RANDOM_STABILITY_RANGE = (40, 100)

DEFAULT_TRAITS = {
    "en": {"habitat": "Tropical Rainforest", "behavior": "Predatory", "primary_color": "Emerald Green"},
    "id": {"habitat": "Hutan Hujan Tropis", "behavior": "Pemangsa", "primary_color": "Hijau Zamrud"},
}


def concepts_for(category: SpecimenCategory, locale: str = "en") -> list[str]:
    """Curated concept strings for a category in a locale (English fallback)."""
    return CONCEPTS.get(locale, CONCEPTS["en"])[category]
