# Common foods, nutrition per 100 g (USDA FoodData Central ids)
FOODS_DATA = [
    # Protein
    {"fdc_id": 171688, "name": "Chicken breast", "category": "Protein", "calories": 165, "protein": 31, "carbs": 0, "fat": 3.6, "translations": {"es": "Pechuga de pollo", "fr": "Poitrine de poulet", "pt": "Peito de frango"}},
    {"fdc_id": 174608, "name": "Egg", "category": "Protein", "calories": 155, "protein": 13, "carbs": 1.1, "fat": 11, "translations": {"es": "Huevo", "fr": "Œuf", "pt": "Ovo"}},
    {"fdc_id": 175168, "name": "Ground beef", "category": "Protein", "calories": 250, "protein": 26, "carbs": 0, "fat": 15, "translations": {"es": "Carne molida", "fr": "Bœuf haché", "pt": "Carne moída"}},
    {"fdc_id": 173705, "name": "Salmon", "category": "Protein", "calories": 208, "protein": 20, "carbs": 0, "fat": 13, "translations": {"es": "Salmón", "fr": "Saumon", "pt": "Salmão"}},
    {"fdc_id": 175303, "name": "Turkey breast", "category": "Protein", "calories": 135, "protein": 30, "carbs": 0, "fat": 0.7, "translations": {"es": "Pechuga de pavo", "fr": "Poitrine de dinde", "pt": "Peito de peru"}},
    {"fdc_id": 173691, "name": "Tuna", "category": "Protein", "calories": 144, "protein": 23, "carbs": 0, "fat": 5, "translations": {"es": "Atún", "fr": "Thon", "pt": "Atum"}},
    # Grains
    {"fdc_id": 171287, "name": "White rice", "category": "Grains", "calories": 130, "protein": 2.7, "carbs": 28, "fat": 0.3, "translations": {"es": "Arroz blanco", "fr": "Riz blanc", "pt": "Arroz branco"}},
    {"fdc_id": 168878, "name": "Brown rice", "category": "Grains", "calories": 112, "protein": 2.6, "carbs": 24, "fat": 0.9, "translations": {"es": "Arroz integral", "fr": "Riz brun", "pt": "Arroz integral"}},
    {"fdc_id": 169756, "name": "Oatmeal", "category": "Grains", "calories": 68, "protein": 2.4, "carbs": 12, "fat": 1.4, "translations": {"es": "Avena", "fr": "Flocons d'avoine", "pt": "Aveia"}},
    {"fdc_id": 168917, "name": "Whole wheat bread", "category": "Grains", "calories": 247, "protein": 13, "carbs": 41, "fat": 3.4, "translations": {"es": "Pan integral", "fr": "Pain complet", "pt": "Pão integral"}},
    {"fdc_id": 169736, "name": "Pasta", "category": "Grains", "calories": 131, "protein": 5, "carbs": 25, "fat": 1.1, "translations": {"es": "Pasta", "fr": "Pâtes", "pt": "Massa"}},
    {"fdc_id": 169414, "name": "Quinoa", "category": "Grains", "calories": 120, "protein": 4.4, "carbs": 21, "fat": 1.9, "translations": {"es": "Quinoa", "fr": "Quinoa", "pt": "Quinoa"}},
    # Vegetables
    {"fdc_id": 171256, "name": "Sweet potato", "category": "Vegetables", "calories": 86, "protein": 1.6, "carbs": 20, "fat": 0.1, "translations": {"es": "Batata", "fr": "Patate douce", "pt": "Batata doce"}},
    {"fdc_id": 170026, "name": "Broccoli", "category": "Vegetables", "calories": 34, "protein": 2.8, "carbs": 7, "fat": 0.4, "translations": {"es": "Brócoli", "fr": "Brocoli", "pt": "Brócolis"}},
    {"fdc_id": 170417, "name": "Spinach", "category": "Vegetables", "calories": 23, "protein": 2.9, "carbs": 3.6, "fat": 0.4, "translations": {"es": "Espinaca", "fr": "Épinards", "pt": "Espinafre"}},
    {"fdc_id": 170108, "name": "Carrot", "category": "Vegetables", "calories": 41, "protein": 0.9, "carbs": 10, "fat": 0.2, "translations": {"es": "Zanahoria", "fr": "Carotte", "pt": "Cenoura"}},
    {"fdc_id": 169967, "name": "Tomato", "category": "Vegetables", "calories": 18, "protein": 0.9, "carbs": 3.9, "fat": 0.2, "translations": {"es": "Tomate", "fr": "Tomate", "pt": "Tomate"}},
    # Oils
    {"fdc_id": 173430, "name": "Butter", "category": "Oils", "calories": 717, "protein": 0.9, "carbs": 0.1, "fat": 81, "translations": {"es": "Mantequilla", "fr": "Beurre", "pt": "Manteiga"}},
    {"fdc_id": 172336, "name": "Coconut oil", "category": "Oils", "calories": 862, "protein": 0, "carbs": 0, "fat": 100, "translations": {"es": "Aceite de coco", "fr": "Huile de coco", "pt": "Óleo de coco"}},
]
