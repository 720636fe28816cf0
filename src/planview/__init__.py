"""planview — browse the proposed changes of a Terraform plan report."""
