"""
ELLU Studios Catalog Data

Static course, learning journey and package records loaded at startup.
Package discounts are percentages derived from the sum of the member course
prices (rounded to whole percent).
"""

COURSES = [
    # PATTERN MAKING - Classical Construction
    {
        "id": "patternmaking-classic-skirt",
        "name": "Classical Pattern Making - Skirt",
        "name_german": "Klassische Schnittkonstruktion - Rock",
        "description": "Master precise mathematical pattern construction for all skirt styles using German precision methods.",
        "level": "beginner",
        "duration": "3 weeks",
        "format": "in-person",
        "skills": ["Basic skirt construction", "Dart placement", "Waist fitting", "A-line variations"],
        "prerequisites": [],
        "outcomes": ["Professional skirt patterns", "Fitting expertise", "Technical precision"],
        "category": "patternmaking",
        "pricing": {"amount": 320, "currency": "EUR"},
        "perfect_for": ["Complete beginners", "Systematic learners", "Career changers"]
    },
    {
        "id": "patternmaking-classic-top",
        "name": "Classical Pattern Making - Top/Shirt",
        "name_german": "Klassische Schnittkonstruktion - Oberteil/Hemd",
        "description": "Systematic approach to bodice and shirt construction with precise fitting techniques.",
        "level": "beginner",
        "duration": "4 weeks",
        "format": "in-person",
        "skills": ["Bodice construction", "Sleeve attachment", "Neckline variations", "Button plackets"],
        "prerequisites": ["Basic pattern knowledge"],
        "outcomes": ["Perfect-fitting tops", "Sleeve mastery", "Professional finishing"],
        "category": "patternmaking",
        "pricing": {"amount": 420, "currency": "EUR"},
        "perfect_for": ["Structured learners", "Precision seekers", "Technical minds"]
    },
    {
        "id": "patternmaking-classic-pants",
        "name": "Classical Pattern Making - Pants",
        "name_german": "Klassische Schnittkonstruktion - Hose",
        "description": "Master trouser construction with perfect fit using mathematical pattern drafting.",
        "level": "intermediate",
        "duration": "4 weeks",
        "format": "in-person",
        "skills": ["Trouser construction", "Crotch curve perfection", "Waistband fitting", "Leg adjustments"],
        "prerequisites": ["Basic pattern experience"],
        "outcomes": ["Perfect trouser fit", "Professional patterns", "Fitting mastery"],
        "category": "patternmaking",
        "pricing": {"amount": 450, "currency": "EUR"},
        "perfect_for": ["Fit perfectionists", "Tailoring enthusiasts", "Professional sewers"]
    },
    {
        "id": "patternmaking-classic-jacket",
        "name": "Classical Pattern Making - Jacket",
        "name_german": "Klassische Schnittkonstruktion - Jacke",
        "description": "Advanced tailoring techniques for structured jackets and blazers.",
        "level": "advanced",
        "duration": "6 weeks",
        "format": "in-person",
        "skills": ["Jacket construction", "Lapel drafting", "Shoulder fitting", "Lining integration"],
        "prerequisites": ["Intermediate pattern skills"],
        "outcomes": ["Tailoring expertise", "Professional jackets", "Advanced fitting"],
        "category": "patternmaking",
        "pricing": {"amount": 680, "currency": "EUR"},
        "perfect_for": ["Advanced sewers", "Tailoring lovers", "Professional developers"]
    },

    # PATTERN MAKING - Draping
    {
        "id": "patternmaking-draping-skirt",
        "name": "Pattern Making through Draping - Skirt",
        "name_german": "Schnittkonstruktion durch Drapieren - Rock",
        "description": "Intuitive skirt creation through fabric manipulation and draping techniques.",
        "level": "beginner",
        "duration": "3 weeks",
        "format": "in-person",
        "skills": ["Fabric draping", "Intuitive fitting", "Creative shaping", "Pattern transfer"],
        "prerequisites": ["Basic sewing knowledge"],
        "outcomes": ["Creative pattern skills", "Fabric understanding", "Artistic approach"],
        "category": "draping",
        "pricing": {"amount": 350, "currency": "EUR"},
        "perfect_for": ["Creative minds", "Visual learners", "Artistic designers"]
    },
    {
        "id": "patternmaking-draping-top",
        "name": "Pattern Making through Draping - Top/Shirt",
        "name_german": "Schnittkonstruktion durch Drapieren - Oberteil/Hemd",
        "description": "Artistic approach to bodice construction through fabric manipulation.",
        "level": "intermediate",
        "duration": "4 weeks",
        "format": "in-person",
        "skills": ["Bodice draping", "Creative necklines", "Asymmetrical designs", "Organic fitting"],
        "prerequisites": ["Basic draping knowledge"],
        "outcomes": ["Artistic bodice skills", "Creative designs", "Organic fitting"],
        "category": "draping",
        "pricing": {"amount": 420, "currency": "EUR"},
        "perfect_for": ["Creative designers", "Artists", "Experimental creators"]
    },
    {
        "id": "patternmaking-draping-dress",
        "name": "Pattern Making through Draping - Dress",
        "name_german": "Schnittkonstruktion durch Drapieren - Kleid",
        "description": "Create flowing, elegant dresses through advanced draping techniques.",
        "level": "intermediate",
        "duration": "5 weeks",
        "format": "in-person",
        "skills": ["Full dress draping", "Complex silhouettes", "Bias techniques", "Evening wear"],
        "prerequisites": ["Draping basics"],
        "outcomes": ["Elegant dress creation", "Advanced draping", "Evening wear skills"],
        "category": "draping",
        "pricing": {"amount": 520, "currency": "EUR"},
        "perfect_for": ["Evening wear designers", "Couture aspirants", "Advanced creators"]
    },
    {
        "id": "patternmaking-draping-jacket",
        "name": "Pattern Making through Draping - Jacket",
        "name_german": "Schnittkonstruktion durch Drapieren - Jacke",
        "description": "Soft construction jackets and unstructured outerwear through draping.",
        "level": "advanced",
        "duration": "6 weeks",
        "format": "in-person",
        "skills": ["Soft jacket construction", "Unstructured design", "Creative outerwear", "Organic fitting"],
        "prerequisites": ["Advanced draping"],
        "outcomes": ["Soft construction mastery", "Creative outerwear", "Advanced techniques"],
        "category": "draping",
        "pricing": {"amount": 650, "currency": "EUR"},
        "perfect_for": ["Advanced drapers", "Soft construction lovers", "Creative professionals"]
    },

    # PATTERN MAKING - Sustainable
    {
        "id": "zero-waste-patternmaking",
        "name": "Zero Waste Pattern Making",
        "name_german": "Null-Abfall Schnittkonstruktion",
        "description": "Revolutionary pattern making that eliminates fabric waste entirely.",
        "level": "advanced",
        "duration": "4 weeks",
        "format": "in-person",
        "skills": ["Zero waste layouts", "Innovative cutting", "Waste elimination", "Sustainable design"],
        "prerequisites": ["Pattern making experience"],
        "outcomes": ["Zero waste expertise", "Sustainable mastery", "Innovation skills"],
        "category": "sustainable",
        "pricing": {"amount": 580, "currency": "EUR"},
        "perfect_for": ["Sustainability advocates", "Innovation seekers", "Eco-conscious designers"]
    },

    # SEWING SKILLS
    {
        "id": "basic-sewing-skirt",
        "name": "Basic Sewing Skills - Skirt",
        "name_german": "Grundlegende Näh-Fertigkeiten - Rock",
        "description": "Essential sewing techniques for perfect skirt construction.",
        "level": "beginner",
        "duration": "2 weeks",
        "format": "in-person",
        "skills": ["Basic seaming", "Zipper insertion", "Waistband application", "Hemming techniques"],
        "prerequisites": [],
        "outcomes": ["Clean skirt construction", "Basic sewing mastery", "Quality finishing"],
        "category": "sewing",
        "pricing": {"amount": 240, "currency": "EUR"},
        "perfect_for": ["Complete beginners", "Hobbyists", "Foundation builders"]
    },
    {
        "id": "seam-types-course",
        "name": "Different Seam Types Mastery",
        "name_german": "Verschiedene Nahtarten Meistern",
        "description": "Comprehensive guide to all professional seaming techniques.",
        "level": "beginner",
        "duration": "2 weeks",
        "format": "in-person",
        "skills": ["French seams", "Flat fell seams", "Bound seams", "Decorative seaming"],
        "prerequisites": ["Basic sewing"],
        "outcomes": ["Professional seaming", "Quality construction", "Technique mastery"],
        "category": "sewing",
        "pricing": {"amount": 280, "currency": "EUR"},
        "perfect_for": ["Quality seekers", "Technique enthusiasts", "Professional aspirants"]
    },
    {
        "id": "pockets-mastery",
        "name": "Pocket Construction Mastery",
        "name_german": "Taschen-Konstruktion Meistern",
        "description": "Master all types of pockets from patch to welt pockets.",
        "level": "intermediate",
        "duration": "3 weeks",
        "format": "in-person",
        "skills": ["Patch pockets", "In-seam pockets", "Welt pockets", "Flap pockets"],
        "prerequisites": ["Basic sewing skills"],
        "outcomes": ["Perfect pockets", "Professional details", "Advanced construction"],
        "category": "sewing",
        "pricing": {"amount": 340, "currency": "EUR"},
        "perfect_for": ["Detail perfectionists", "Professional sewers", "Quality enthusiasts"]
    },
    {
        "id": "sewing-skills-shirt",
        "name": "Sewing Skills - Shirt",
        "name_german": "Näh-Fertigkeiten - Hemd",
        "description": "Advanced shirt construction with professional finishing.",
        "level": "intermediate",
        "duration": "4 weeks",
        "format": "in-person",
        "skills": ["Collar construction", "Button plackets", "Cuff attachment", "Professional pressing"],
        "prerequisites": ["Basic sewing experience"],
        "outcomes": ["Perfect shirt construction", "Professional finishing", "Detail mastery"],
        "category": "sewing",
        "pricing": {"amount": 420, "currency": "EUR"},
        "perfect_for": ["Precision sewers", "Professional developers", "Quality focused"]
    },
    {
        "id": "sewing-skills-pants",
        "name": "Sewing Skills - Pants",
        "name_german": "Näh-Fertigkeiten - Hose",
        "description": "Master trouser construction and professional finishing techniques.",
        "level": "intermediate",
        "duration": "4 weeks",
        "format": "in-person",
        "skills": ["Trouser construction", "Fly zipper insertion", "Professional waistbands", "Hemming perfection"],
        "prerequisites": ["Intermediate sewing"],
        "outcomes": ["Perfect trouser construction", "Professional techniques", "Quality finishing"],
        "category": "sewing",
        "pricing": {"amount": 450, "currency": "EUR"},
        "perfect_for": ["Tailoring enthusiasts", "Quality seekers", "Professional sewers"]
    },
    {
        "id": "collar-construction",
        "name": "Sewing of Collars",
        "name_german": "Kragen-Konstruktion",
        "description": "Master all collar types from basic to complex tailored collars.",
        "level": "intermediate",
        "duration": "3 weeks",
        "format": "in-person",
        "skills": ["Basic collars", "Shirt collars", "Stand collars", "Tailored collars"],
        "prerequisites": ["Intermediate sewing"],
        "outcomes": ["Perfect collars", "Professional finishing", "Advanced techniques"],
        "category": "sewing",
        "pricing": {"amount": 380, "currency": "EUR"},
        "perfect_for": ["Detail lovers", "Tailoring enthusiasts", "Quality focused"]
    },
    {
        "id": "jacket-sewing",
        "name": "Sewing a Jacket",
        "name_german": "Jacken-Nähen",
        "description": "Complete jacket construction from interfacing to final pressing.",
        "level": "advanced",
        "duration": "6 weeks",
        "format": "in-person",
        "skills": ["Interfacing techniques", "Shoulder construction", "Lining installation", "Professional pressing"],
        "prerequisites": ["Advanced sewing skills"],
        "outcomes": ["Professional jacket construction", "Tailoring mastery", "Industry-level skills"],
        "category": "sewing",
        "pricing": {"amount": 680, "currency": "EUR"},
        "perfect_for": ["Advanced sewers", "Tailoring aspirants", "Professional developers"]
    },

    # DESIGN COURSES
    {
        "id": "clo3d-course",
        "name": "CLO3D Digital Fashion Design",
        "name_german": "CLO3D Digitale Mode-Design",
        "description": "3D fashion design and virtual prototyping with industry-leading software.",
        "level": "intermediate",
        "duration": "6 weeks",
        "format": "hybrid",
        "skills": ["3D pattern making", "Virtual fitting", "Fabric simulation", "Digital prototyping"],
        "prerequisites": ["Basic pattern knowledge"],
        "outcomes": ["3D design mastery", "Virtual prototyping", "Modern fashion tech"],
        "category": "digital",
        "pricing": {"amount": 850, "currency": "EUR"},
        "perfect_for": ["Tech-savvy designers", "Future-focused creators", "Digital natives"]
    },
    {
        "id": "adobe-illustrator-basics",
        "name": "Adobe Illustrator Basics",
        "name_german": "Adobe Illustrator Grundlagen",
        "description": "Foundation skills in vector-based fashion design and technical drawings.",
        "level": "beginner",
        "duration": "3 weeks",
        "format": "online",
        "skills": ["Vector basics", "Fashion flats", "Basic illustration", "Color application"],
        "prerequisites": ["Basic computer skills"],
        "outcomes": ["Digital design foundation", "Technical drawing skills", "Basic portfolio pieces"],
        "category": "digital",
        "pricing": {"amount": 320, "currency": "EUR"},
        "perfect_for": ["Digital beginners", "Modern designers", "Career changers"]
    },
    {
        "id": "adobe-illustrator-intermediate",
        "name": "Adobe Illustrator Intermediate",
        "name_german": "Adobe Illustrator Mittelstufe",
        "description": "Advanced illustration techniques and professional design workflows.",
        "level": "intermediate",
        "duration": "4 weeks",
        "format": "online",
        "skills": ["Advanced illustration", "Pattern creation", "Professional workflows", "Print preparation"],
        "prerequisites": ["Illustrator basics"],
        "outcomes": ["Advanced design skills", "Professional workflows", "Portfolio development"],
        "category": "digital",
        "pricing": {"amount": 420, "currency": "EUR"},
        "perfect_for": ["Developing designers", "Portfolio builders", "Professional aspirants"]
    },
    {
        "id": "adobe-illustrator-advanced",
        "name": "Adobe Illustrator Advanced",
        "name_german": "Adobe Illustrator Fortgeschritten",
        "description": "Master-level techniques for complex fashion illustration and design.",
        "level": "advanced",
        "duration": "4 weeks",
        "format": "online",
        "skills": ["Complex illustrations", "Advanced effects", "Brand development", "Master techniques"],
        "prerequisites": ["Intermediate Illustrator"],
        "outcomes": ["Master-level skills", "Professional illustrations", "Industry expertise"],
        "category": "digital",
        "pricing": {"amount": 520, "currency": "EUR"},
        "perfect_for": ["Advanced designers", "Industry professionals", "Master-level creators"]
    },
    {
        "id": "coloring-course",
        "name": "Fashion Illustration Coloring",
        "name_german": "Mode-Illustration Kolorierung",
        "description": "Master color application and rendering techniques for fashion illustration.",
        "level": "beginner",
        "duration": "2 weeks",
        "format": "hybrid",
        "skills": ["Color theory", "Rendering techniques", "Fabric representation", "Digital coloring"],
        "prerequisites": ["Basic drawing skills"],
        "outcomes": ["Professional coloring", "Realistic rendering", "Color mastery"],
        "category": "design",
        "pricing": {"amount": 280, "currency": "EUR"},
        "perfect_for": ["Illustration enthusiasts", "Color lovers", "Visual designers"]
    },
    {
        "id": "illustration-1",
        "name": "Fashion Illustration 1",
        "name_german": "Mode-Illustration 1",
        "description": "Foundation course in fashion figure drawing and basic illustration.",
        "level": "beginner",
        "duration": "4 weeks",
        "format": "in-person",
        "skills": ["Fashion figure", "Proportions", "Basic poses", "Simple garment rendering"],
        "prerequisites": [],
        "outcomes": ["Fashion drawing foundation", "Figure mastery", "Basic illustrations"],
        "category": "design",
        "pricing": {"amount": 380, "currency": "EUR"},
        "perfect_for": ["Drawing beginners", "Creative minds", "Visual learners"]
    },
    {
        "id": "illustration-2",
        "name": "Fashion Illustration 2",
        "name_german": "Mode-Illustration 2",
        "description": "Advanced fashion illustration with complex poses and detailed rendering.",
        "level": "intermediate",
        "duration": "4 weeks",
        "format": "in-person",
        "skills": ["Complex poses", "Detailed rendering", "Advanced techniques", "Style development"],
        "prerequisites": ["Illustration 1"],
        "outcomes": ["Advanced illustration skills", "Personal style", "Professional drawings"],
        "category": "design",
        "pricing": {"amount": 450, "currency": "EUR"},
        "perfect_for": ["Developing illustrators", "Style seekers", "Advanced creators"]
    },
    {
        "id": "anatomy-basics",
        "name": "Anatomy Basics for Fashion",
        "name_german": "Anatomie-Grundlagen für Mode",
        "description": "Essential anatomy knowledge for accurate fashion figure drawing.",
        "level": "beginner",
        "duration": "3 weeks",
        "format": "in-person",
        "skills": ["Human anatomy", "Proportions", "Body structure", "Movement basics"],
        "prerequisites": [],
        "outcomes": ["Anatomical accuracy", "Proportion mastery", "Realistic figures"],
        "category": "design",
        "pricing": {"amount": 320, "currency": "EUR"},
        "perfect_for": ["Accuracy seekers", "Foundation builders", "Realistic artists"]
    },
    {
        "id": "anatomy-advanced",
        "name": "Advanced Anatomy for Fashion",
        "name_german": "Fortgeschrittene Anatomie für Mode",
        "description": "Advanced anatomy and movement for dynamic fashion illustration.",
        "level": "intermediate",
        "duration": "3 weeks",
        "format": "in-person",
        "skills": ["Advanced anatomy", "Dynamic poses", "Movement studies", "Muscle structure"],
        "prerequisites": ["Anatomy basics"],
        "outcomes": ["Dynamic figure drawing", "Movement mastery", "Advanced accuracy"],
        "category": "design",
        "pricing": {"amount": 420, "currency": "EUR"},
        "perfect_for": ["Advanced illustrators", "Movement enthusiasts", "Professional artists"]
    },
    {
        "id": "sketching-course",
        "name": "Fashion Sketching Techniques",
        "name_german": "Mode-Skizzen Techniken",
        "description": "Quick sketching and ideation techniques for fashion designers.",
        "level": "beginner",
        "duration": "2 weeks",
        "format": "in-person",
        "skills": ["Quick sketching", "Ideation methods", "Design development", "Concept visualization"],
        "prerequisites": [],
        "outcomes": ["Rapid visualization", "Idea development", "Design sketching"],
        "category": "design",
        "pricing": {"amount": 260, "currency": "EUR"},
        "perfect_for": ["Idea generators", "Quick thinkers", "Design developers"]
    },
    {
        "id": "moodboard-inspiration",
        "name": "Moodboard and Inspiration",
        "name_german": "Moodboard und Inspiration",
        "description": "Learn to create compelling moodboards and develop design inspiration.",
        "level": "beginner",
        "duration": "2 weeks",
        "format": "hybrid",
        "skills": ["Inspiration gathering", "Visual storytelling", "Concept development", "Presentation skills"],
        "prerequisites": [],
        "outcomes": ["Strong concept development", "Visual communication", "Inspiration mastery"],
        "category": "design",
        "pricing": {"amount": 280, "currency": "EUR"},
        "perfect_for": ["Concept developers", "Visual thinkers", "Inspiration seekers"]
    },
    {
        "id": "collection-development",
        "name": "Collection Development",
        "name_german": "Kollektions-Entwicklung",
        "description": "Complete process of developing cohesive fashion collections.",
        "level": "intermediate",
        "duration": "6 weeks",
        "format": "hybrid",
        "skills": ["Collection planning", "Design cohesion", "Market research", "Line development"],
        "prerequisites": ["Basic design knowledge"],
        "outcomes": ["Complete collection", "Professional presentation", "Market awareness"],
        "category": "design",
        "pricing": {"amount": 650, "currency": "EUR"},
        "perfect_for": ["Collection designers", "Brand developers", "Professional aspirants"]
    },
    {
        "id": "sustainable-fashion-concepts",
        "name": "Sustainable Fashion Concepts",
        "name_german": "Nachhaltige Mode-Konzepte",
        "description": "Comprehensive sustainable design principles and eco-conscious creation.",
        "level": "beginner",
        "duration": "4 weeks",
        "format": "hybrid",
        "skills": ["Sustainable principles", "Eco-materials", "Circular design", "Environmental impact"],
        "prerequisites": [],
        "outcomes": ["Sustainable mindset", "Eco-design skills", "Environmental awareness"],
        "category": "sustainable",
        "pricing": {"amount": 450, "currency": "EUR"},
        "perfect_for": ["Eco-conscious designers", "Future-focused creators", "Sustainability advocates"]
    },
    {
        "id": "presentation-photoshop-indesign",
        "name": "Presentation with Photoshop & InDesign",
        "name_german": "Präsentation mit Photoshop & InDesign",
        "description": "Professional presentation creation for fashion portfolios and collections.",
        "level": "intermediate",
        "duration": "4 weeks",
        "format": "online",
        "skills": ["Layout design", "Image editing", "Professional presentations", "Portfolio creation"],
        "prerequisites": ["Basic computer skills"],
        "outcomes": ["Professional presentations", "Portfolio mastery", "Visual communication"],
        "category": "digital",
        "pricing": {"amount": 520, "currency": "EUR"},
        "perfect_for": ["Portfolio builders", "Professional presenters", "Career developers"]
    },

    # TEXTILES COURSES
    {
        "id": "textile-types-overview",
        "name": "Textile Types and Overview",
        "name_german": "Textilarten und Überblick",
        "description": "Comprehensive introduction to all textile types and their properties.",
        "level": "beginner",
        "duration": "2 weeks",
        "format": "in-person",
        "skills": ["Fabric identification", "Textile properties", "Care instructions", "Application knowledge"],
        "prerequisites": [],
        "outcomes": ["Textile expertise", "Fabric selection skills", "Material knowledge"],
        "category": "textiles",
        "pricing": {"amount": 240, "currency": "EUR"},
        "perfect_for": ["Material enthusiasts", "Quality seekers", "Foundation builders"]
    },
    {
        "id": "textile-creation",
        "name": "Textile Creation",
        "name_german": "Textil-Herstellung",
        "description": "Understanding textile manufacturing and creation processes.",
        "level": "intermediate",
        "duration": "3 weeks",
        "format": "hybrid",
        "skills": ["Manufacturing processes", "Weaving basics", "Knitting principles", "Finishing techniques"],
        "prerequisites": ["Textile basics"],
        "outcomes": ["Manufacturing knowledge", "Process understanding", "Quality assessment"],
        "category": "textiles",
        "pricing": {"amount": 380, "currency": "EUR"},
        "perfect_for": ["Process enthusiasts", "Quality focused", "Manufacturing interested"]
    },
    {
        "id": "sustainable-textiles",
        "name": "Sustainable Textiles",
        "name_german": "Nachhaltige Textilien",
        "description": "Eco-friendly textile options and sustainable material choices.",
        "level": "beginner",
        "duration": "2 weeks",
        "format": "hybrid",
        "skills": ["Sustainable materials", "Eco-friendly processes", "Impact assessment", "Alternative fibers"],
        "prerequisites": [],
        "outcomes": ["Sustainable material knowledge", "Eco-conscious choices", "Environmental awareness"],
        "category": "sustainable",
        "pricing": {"amount": 320, "currency": "EUR"},
        "perfect_for": ["Eco-conscious designers", "Sustainability advocates", "Future-focused creators"]
    }
]

# Learning Journey Templates
LEARNING_JOURNEYS = [
    {
        "id": "beginner-journey",
        "name": "Foundation to Professional Journey",
        "description": "Complete beginner path from zero to professional pattern making skills",
        "target_audience": "Complete beginners wanting career or serious hobby skills",
        "duration": "4-6 months",
        "outcome": "Ready to work as pattern maker or start own design business",
        "phases": [
            {
                "phase": 1,
                "name": "Pattern Foundation",
                "duration": "6 weeks",
                "courses": ["patternmaking-classic-skirt", "basic-sewing-skirt"],
                "description": "Master precise pattern construction and basic sewing with skirts"
            },
            {
                "phase": 2,
                "name": "Expand Skills",
                "duration": "8 weeks",
                "courses": ["patternmaking-classic-top", "sewing-skills-shirt"],
                "description": "Add tops and shirts to your skillset with both pattern and sewing"
            },
            {
                "phase": 3,
                "name": "Creative Development",
                "duration": "6 weeks",
                "courses": ["moodboard-inspiration", "illustration-1", "adobe-illustrator-basics"],
                "description": "Develop creative vision and digital presentation skills"
            }
        ],
        "courses": ["patternmaking-classic-skirt", "basic-sewing-skirt", "patternmaking-classic-top", "sewing-skills-shirt", "moodboard-inspiration", "illustration-1", "adobe-illustrator-basics"]
    },
    {
        "id": "advanced-journey",
        "name": "Professional Mastery Path",
        "description": "Advanced journey for experienced makers seeking professional mastery",
        "target_audience": "Experienced sewers and pattern makers",
        "duration": "3-5 months",
        "outcome": "Master-level skills ready for professional work",
        "phases": [
            {
                "phase": 1,
                "name": "Advanced Construction",
                "duration": "8 weeks",
                "courses": ["patternmaking-classic-jacket", "jacket-sewing"],
                "description": "Master complex jacket construction and tailoring"
            },
            {
                "phase": 2,
                "name": "Creative Mastery",
                "duration": "6 weeks",
                "courses": ["patternmaking-draping-dress", "collection-development"],
                "description": "Advanced draping and professional collection development"
            },
            {
                "phase": 3,
                "name": "Digital Integration",
                "duration": "6 weeks",
                "courses": ["clo3d-course", "presentation-photoshop-indesign"],
                "description": "Integrate cutting-edge digital tools and professional presentation"
            }
        ],
        "courses": ["patternmaking-classic-jacket", "jacket-sewing", "patternmaking-draping-dress", "collection-development", "clo3d-course", "presentation-photoshop-indesign"]
    },
    {
        "id": "sustainable-journey",
        "name": "Eco Fashion Designer Path",
        "description": "Comprehensive sustainable fashion design education",
        "target_audience": "Environmentally conscious designers",
        "duration": "4-6 months",
        "outcome": "Expert in sustainable fashion design and production",
        "phases": [
            {
                "phase": 1,
                "name": "Sustainable Foundation",
                "duration": "6 weeks",
                "courses": ["sustainable-fashion-concepts", "sustainable-textiles"],
                "description": "Learn eco-conscious design principles and sustainable materials"
            },
            {
                "phase": 2,
                "name": "Zero-Waste Mastery",
                "duration": "8 weeks",
                "courses": ["zero-waste-patternmaking", "patternmaking-classic-skirt", "patternmaking-classic-top"],
                "description": "Master zero waste techniques with practical application"
            },
            {
                "phase": 3,
                "name": "Sustainable Production",
                "duration": "6 weeks",
                "courses": ["basic-sewing-skirt", "seam-types-course"],
                "description": "Apply sustainable construction methods and quality techniques"
            }
        ],
        "courses": ["sustainable-fashion-concepts", "sustainable-textiles", "zero-waste-patternmaking", "patternmaking-classic-skirt", "patternmaking-classic-top", "basic-sewing-skirt", "seam-types-course"]
    },
    {
        "id": "digital-journey",
        "name": "Digital Fashion Designer Path",
        "description": "Modern digital-first fashion design education",
        "target_audience": "Tech-savvy, digital-first learners",
        "duration": "3-5 months",
        "outcome": "Expert in digital fashion design and presentation",
        "phases": [
            {
                "phase": 1,
                "name": "Digital Foundations",
                "duration": "4 weeks",
                "courses": ["adobe-illustrator-basics", "sketching-course"],
                "description": "Master digital design tools and quick visualization"
            },
            {
                "phase": 2,
                "name": "Advanced Digital Skills",
                "duration": "8 weeks",
                "courses": ["adobe-illustrator-intermediate", "clo3d-course", "illustration-1"],
                "description": "Advanced illustration, 3D design, and digital presentation"
            },
            {
                "phase": 3,
                "name": "Professional Portfolio",
                "duration": "6 weeks",
                "courses": ["presentation-photoshop-indesign", "collection-development"],
                "description": "Build industry-ready portfolio and collection concepts"
            }
        ],
        "courses": ["adobe-illustrator-basics", "sketching-course", "adobe-illustrator-intermediate", "clo3d-course", "illustration-1", "presentation-photoshop-indesign", "collection-development"]
    }
]

# Course Packages - Bundled courses with discounts
COURSE_PACKAGES = [
    {
        "id": "beginner-complete-package",
        "name": "Complete Beginner Package",
        "name_german": "Komplettes Anfänger-Paket",
        "description": "Everything a complete beginner needs: pattern making (classic + draping), sewing, and design fundamentals.",
        "level": "beginner",
        "duration": "10 weeks",
        "courses": [
            "patternmaking-classic-skirt",
            "patternmaking-draping-skirt",
            "basic-sewing-skirt",
            "adobe-illustrator-basics",
            "moodboard-inspiration",
            "illustration-1"
        ],
        "pricing": {
            "amount": 1450,
            "currency": "EUR",
            "discount": 23
        },
        "target_audience": ["Complete beginners", "Career changers", "Hobby enthusiasts"],
        "outcomes": ["Complete skirt creation skills", "Digital design foundation", "Creative development", "Professional presentation"]
    },
    {
        "id": "pattern-mastery-package",
        "name": "Pattern Making Mastery",
        "name_german": "Schnittkonstruktion Meisterschaft",
        "description": "Master both classical and draping approaches across all garment types.",
        "level": "intermediate",
        "duration": "18 weeks",
        "courses": [
            "patternmaking-classic-skirt",
            "patternmaking-classic-top",
            "patternmaking-classic-pants",
            "patternmaking-draping-skirt",
            "patternmaking-draping-top",
            "patternmaking-draping-dress"
        ],
        "pricing": {
            "amount": 2200,
            "currency": "EUR",
            "discount": 11
        },
        "target_audience": ["Serious pattern makers", "Professional developers", "Technique perfectionists"],
        "outcomes": ["Complete pattern making mastery", "Both construction approaches", "All garment types", "Professional expertise"]
    },
    {
        "id": "digital-designer-package",
        "name": "Digital Fashion Designer",
        "name_german": "Digitale Mode-Designerin",
        "description": "Complete digital skillset from basic illustration to advanced 3D design.",
        "level": "intermediate",
        "duration": "12 weeks",
        "courses": [
            "adobe-illustrator-basics",
            "adobe-illustrator-intermediate",
            "clo3d-course",
            "illustration-1",
            "illustration-2",
            "presentation-photoshop-indesign"
        ],
        "pricing": {
            "amount": 2150,
            "currency": "EUR",
            "discount": 27
        },
        "target_audience": ["Tech-savvy designers", "Modern fashion professionals", "Digital natives"],
        "outcomes": ["Complete digital mastery", "3D design skills", "Professional presentations", "Industry-ready portfolio"]
    },
    {
        "id": "sustainable-creator-package",
        "name": "Sustainable Fashion Creator",
        "name_german": "Nachhaltige Mode-Schöpferin",
        "description": "Comprehensive sustainable fashion education with zero-waste techniques.",
        "level": "intermediate",
        "duration": "14 weeks",
        "courses": [
            "sustainable-fashion-concepts",
            "zero-waste-patternmaking",
            "sustainable-textiles",
            "patternmaking-classic-skirt",
            "patternmaking-classic-top",
            "basic-sewing-skirt"
        ],
        "pricing": {
            "amount": 1980,
            "currency": "EUR",
            "discount": 15
        },
        "target_audience": ["Eco-conscious designers", "Sustainability advocates", "Future-focused creators"],
        "outcomes": ["Sustainable design mastery", "Zero-waste expertise", "Eco-material knowledge", "Environmental leadership"]
    },
    {
        "id": "professional-sewer-package",
        "name": "Professional Sewing Mastery",
        "name_german": "Professionelle Näh-Meisterschaft",
        "description": "Master all professional sewing techniques from basic to advanced construction.",
        "level": "intermediate",
        "duration": "16 weeks",
        "courses": [
            "basic-sewing-skirt",
            "seam-types-course",
            "pockets-mastery",
            "sewing-skills-shirt",
            "sewing-skills-pants",
            "collar-construction",
            "jacket-sewing"
        ],
        "pricing": {
            "amount": 2450,
            "currency": "EUR",
            "discount": 12
        },
        "target_audience": ["Quality perfectionists", "Professional aspirants", "Advanced hobbyists"],
        "outcomes": ["Professional construction skills", "Perfect finishing techniques", "Industry-level quality", "Master craftsmanship"]
    },
    {
        "id": "fashion-entrepreneur-package",
        "name": "Fashion Entrepreneur Complete",
        "name_german": "Mode-Unternehmerin Komplett",
        "description": "Everything needed to start your fashion business: design, construction, and business skills.",
        "level": "advanced",
        "duration": "20 weeks",
        "courses": [
            "patternmaking-classic-top",
            "patternmaking-draping-dress",
            "sewing-skills-shirt",
            "collection-development",
            "adobe-illustrator-intermediate",
            "presentation-photoshop-indesign",
            "sustainable-fashion-concepts"
        ],
        "pricing": {
            "amount": 2850,
            "currency": "EUR",
            "discount": 16
        },
        "target_audience": ["Aspiring entrepreneurs", "Brand developers", "Business-minded creatives"],
        "outcomes": ["Complete fashion business skills", "Professional collections", "Brand development", "Market-ready expertise"]
    }
]

