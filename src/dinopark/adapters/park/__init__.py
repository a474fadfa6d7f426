"""Store adapters for the park: cages, dinosaurs and the species registry."""
